"""taskbot: a line-oriented task manager bot with flat-file persistence."""

__version__ = "0.1.0"
