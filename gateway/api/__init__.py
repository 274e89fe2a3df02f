"""
API Routes

FastAPI route handlers organized by domain.
"""

from . import activities

__all__ = ['activities']
