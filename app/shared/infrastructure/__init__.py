"""
Infrastructure layer package for the User Records API.
Provides the async database engine and per-request sessions.
"""

__all__ = []
