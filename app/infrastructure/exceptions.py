"""
Custom exceptions for the Infrastructure layer.
"""


class InfrastructureError(Exception):
    """Base class for exceptions in the infrastructure layer."""
    pass


class DuplicateRegistrationError(InfrastructureError):
    """Raised when the database rejects a student because its RA is already taken."""

    def __init__(self, ra: str):
        self.ra = ra
        super().__init__(f"RA already exists: {ra}")
