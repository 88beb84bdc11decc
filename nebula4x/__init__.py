"""Game-state data model, JSON handling, safe file writes and event-log export for a 4X strategy game."""

__version__ = "0.1.0"