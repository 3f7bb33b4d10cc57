"""Track expenses from the command line, stored in a CSV file."""

__version__ = "0.1.0"