"""
API route modules.

Each module defines routes for one domain area.
"""

from routes.data_center import router as data_center_router

__all__ = [
    "data_center_router",
]
