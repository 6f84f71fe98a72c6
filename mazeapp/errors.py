"""Exceptions raised by the maze core."""


class MazeError(Exception):
    """Base class for every error raised by mazeapp."""


class ConfigurationError(MazeError, ValueError):
    """Grid dimensions or generator settings that cannot produce a valid maze."""


class UnknownAlgorithmError(MazeError, KeyError):
    """No solver is registered under the requested name."""

    def __init__(self, name):
        super().__init__(name)
        self.name = name

    def __str__(self):
        return f"unknown algorithm: {self.name!r}"


class SerializationError(MazeError, ValueError):
    """A serialized maze record is missing fields or holds bad values."""
