"""Exceptions and warnings raised by fault-terrain."""


class FaultTerrainError(Exception):
    """Base exception for fault-terrain."""

    pass


class ConfigurationError(FaultTerrainError, ValueError):
    """Invalid grid or fault-formation parameters."""

    pass


class DegenerateGeometryWarning(UserWarning):
    """A zero-area triangle was found while rebuilding vertex normals."""

    pass
