"""
API Routers
"""

from . import worklogs

__all__ = ["worklogs"]
