"""
Routers module
"""
from erdify.routers.schema_router import router as schema_router

__all__ = [
    "schema_router",
]
