"""Game-loop utilities for a 2D role-playing game: clock, day-night cycle, events, frame timer, text wrapping, noise and sprite animation."""

__version__ = "0.1.0"
__all__ = ["animation", "clock", "daynight", "event", "noise", "text", "timer"]