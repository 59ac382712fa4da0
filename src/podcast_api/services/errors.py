"""
podcast_api.services.errors

Expected domain failures raised by services.

Resolvers turn these into `ok: false` results; anything else is a real error and
propagates as a GraphQL error.
"""

from __future__ import annotations


class DomainError(Exception):
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(DomainError):
    pass


class ConflictError(DomainError):
    pass


class OwnershipError(DomainError):
    pass


class InvalidCredentialsError(DomainError):
    pass


class ValidationError(DomainError):
    pass
