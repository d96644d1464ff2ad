"""
Exceptions raised by the snake engine.
"""


class SnakeEngineError(Exception):
    """Base class for engine errors."""


class ConfigurationError(SnakeEngineError, ValueError):
    """The requested configuration cannot hold a snake plus the free-cell margin."""


class PlacementExhausted(SnakeEngineError):
    """No free cell is left for food."""

    def __init__(self, attempts: int, message: str = None):
        self.attempts = attempts
        super().__init__(message or f"No free cell for food after {attempts} attempts")
