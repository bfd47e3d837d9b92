"""WhiteToMove: chess rules engine and game session."""

__version__ = "0.1.0"
