"""REST API for cut layout generation."""

from cutlayout.web.app import create_app

__all__ = ["create_app"]
