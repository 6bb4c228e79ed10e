"""
API Dependencies

Provides dependency injection for services and database sessions.
Each request gets its own session, repository and service instance.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.repositories.student_repository import StudentRepository
from app.services.core.student_service import StudentService


def get_student_repository(db: Session = Depends(get_db)) -> StudentRepository:
    """
    Get Student Repository instance bound to the request session

    Returns:
        StudentRepository: Repository over the student table
    """
    return StudentRepository(db)


def get_student_service(
    repository: StudentRepository = Depends(get_student_repository),
) -> StudentService:
    """
    Get Student Service instance

    Returns:
        StudentService: Configured student service
    """
    return StudentService(repository)
