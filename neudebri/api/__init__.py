"""
API package.
"""

from neudebri.api.routes import router

__all__ = ["router"]
