"""Parse, split by sensor, search and randomly generate timestamped sensor reading logs."""

__version__ = "0.1.0"