"""Command-line tools for the Unicorn HAT HD driver."""
