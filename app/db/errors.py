"""
Failure taxonomy for the data-access layer.

CRUD functions never leak driver exceptions to the routes: every failure is
raised as a DataStoreError whose ``kind`` tells the caller what happened, so
status codes are chosen without looking at driver error codes or messages.
"""
from enum import Enum


class ErrorKind(str, Enum):
    """What went wrong while talking to the database."""
    CONSTRAINT_VIOLATION = "constraint_violation"
    NOT_FOUND = "not_found"
    INVALID = "invalid"
    UNKNOWN = "unknown"


class DataStoreError(Exception):
    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __repr__(self):
        return f"<DataStoreError(kind={self.kind.value}, message='{self.message}')>"
