"""
External APIs integration package.

This package contains clients for the HTTP services the frontend talks to.
"""

from .student_api_client import StudentAPIClient

__all__ = ['StudentAPIClient']
