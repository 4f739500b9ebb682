"""Company records kept as JSON tables with text mirrors, and a tkinter interface."""

__version__ = "0.1.0"