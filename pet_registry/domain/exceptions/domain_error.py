"""
DomainError - Base class for every pet registry business error.
"""


class DomainError(Exception):
    """Base error for all pet domain errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
