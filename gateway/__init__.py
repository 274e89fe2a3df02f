"""
LG Gateway

FastAPI-based gateway exposing activity resolution over HTTP.
"""

from .main import app

__all__ = ['app']
__version__ = '1.0.0'
