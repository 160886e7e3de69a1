"""CPU usage and temperature status blocks with sparkline history for status bars."""

__version__ = "0.1.0"