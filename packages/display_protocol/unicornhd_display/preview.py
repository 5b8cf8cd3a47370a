"""Terminal and image previews of a frame buffer, plus test patterns."""

from __future__ import annotations

from PIL import Image

from .framebuffer import HEIGHT, WIDTH, FrameBuffer

PATTERNS = ("black", "white", "red", "green", "blue", "quadrants", "h-gradient", "v-gradient", "checkerboard")

_RESET = "\x1b[0m"


def render_ansi(buffer: FrameBuffer, glyph: str = "*") -> str:
    """Draw the buffer as a grid of 24-bit colored glyphs, in logical orientation."""
    lines: list[str] = []
    for y in range(HEIGHT):
        cells = []
        for x in range(WIDTH):
            p = buffer.get_pixel(x, y)
            cells.append(f"\x1b[38;2;{p.r};{p.g};{p.b}m{glyph}")
        lines.append("".join(cells) + _RESET)
    return "\n".join(lines)


def to_image(buffer: FrameBuffer, scale: int = 1) -> Image.Image:
    """Return the panel as it appears after rotation (physical order)."""
    img = Image.new("RGB", (WIDTH, HEIGHT))
    img.putdata([p.as_tuple() for p in buffer.physical_pixels()])
    if scale > 1:
        img = img.resize((WIDTH * scale, HEIGHT * scale), resample=Image.NEAREST)
    return img


def load_image(buffer: FrameBuffer, image: Image.Image) -> None:
    """Write an image into the buffer in logical coordinates, resizing to 16x16."""
    if image.mode != "RGB":
        image = image.convert("RGB")
    if image.size != (WIDTH, HEIGHT):
        image = image.resize((WIDTH, HEIGHT), resample=Image.LANCZOS)
    px = image.load()
    for y in range(HEIGHT):
        for x in range(WIDTH):
            buffer.set_pixel(x, y, px[x, y])


def build_test_pattern(name: str, width: int = WIDTH, height: int = HEIGHT) -> Image.Image:
    img = Image.new("RGB", (width, height), (0, 0, 0))
    px = img.load()

    for y in range(height):
        for x in range(width):
            if name == "black":
                c = (0, 0, 0)
            elif name == "white":
                c = (255, 255, 255)
            elif name == "red":
                c = (255, 0, 0)
            elif name == "green":
                c = (0, 255, 0)
            elif name == "blue":
                c = (0, 0, 255)
            elif name == "quadrants":
                if x < width // 2 and y < height // 2:
                    c = (255, 0, 0)
                elif x >= width // 2 and y < height // 2:
                    c = (0, 255, 0)
                elif x < width // 2 and y >= height // 2:
                    c = (0, 0, 255)
                else:
                    c = (255, 255, 255)
            elif name == "h-gradient":
                v = int(255 * (x / max(width - 1, 1)))
                c = (v, v, v)
            elif name == "v-gradient":
                v = int(255 * (y / max(height - 1, 1)))
                c = (v, v, v)
            elif name == "checkerboard":
                c = (255, 255, 255) if ((x // 2 + y // 2) % 2 == 0) else (0, 0, 0)
            else:
                raise ValueError(f"Unknown pattern: {name}")
            px[x, y] = c
    return img
