"""House number expansion for address indexing."""

from .linear_ref import GeometryError
from .result import AddressResult
from .schema import AddressDocument, NewStyleInterpolation, OldStyleInterpolation, Point

__all__ = [
    "AddressDocument",
    "AddressResult",
    "GeometryError",
    "NewStyleInterpolation",
    "OldStyleInterpolation",
    "Point",
]
