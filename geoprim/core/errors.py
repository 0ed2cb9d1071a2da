"""
Exceptions raised by geoprim.

Degenerate geometry never raises; it propagates NaN, inf or -1 sentinels.
Only malformed inputs (wrong shapes) are reported with exceptions.
"""


class PrimitiveShapeError(ValueError):
    """Raised when a vector, point set or matrix has the wrong shape."""
    pass


__all__ = ["PrimitiveShapeError"]
