"""HTTP surface of the data list engine."""

from .datalist_api import router as datalist_router
from .editors_api import router as editors_router
from .errors import ApiError

__all__ = ["ApiError", "datalist_router", "editors_router"]
