"""
Services Layer

Business logic between the API endpoints and the repositories.
"""

__all__ = []
