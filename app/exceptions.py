# app/exceptions.py


class DatabaseConnectionError(Exception):
    """Raised when the initial MongoDB connection cannot be established."""


class EmployeeWriteError(Exception):
    """Raised when MongoDB does not acknowledge an employee insert."""
