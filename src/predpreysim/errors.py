class ConfigurationError(ValueError):
    """Field dimensions that cannot describe a grid (zero or negative)."""


class OutOfBoundsError(IndexError):
    """A location outside the field was queried or placed."""
