"""
Core Services Module

Provides the CRUD and paged-search services over student records.
"""

from .student_service import StudentService

__all__ = ["StudentService"]
