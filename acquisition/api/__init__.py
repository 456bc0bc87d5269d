"""API routes."""

from .missions import router as missions_router
from .status import router as status_router

__all__ = ["missions_router", "status_router"]
