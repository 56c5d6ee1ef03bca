"""API routers for the REST API."""

from cutlayout.web.routers.layout import router as layout_router

__all__ = ["layout_router"]
