"""Base service class for domain services."""

import asyncio
from typing import Awaitable, TypeVar

import logfire

from blog.domain.error import DomainError, UnavailableError

T = TypeVar("T")


class Service:
    """Base class for all domain services.

    Domain services hold the business rules that span an entity and the
    collaborators it depends on (registries, identity lookups).
    """

    collaborator_timeout: float = 2.0

    async def call_collaborator(self, name: str, call: Awaitable[T]) -> T:
        """Await a collaborator lookup, mapping failures to UnavailableError.

        Domain errors raised by the collaborator (e.g. NotFoundError) pass
        through untouched.

        Args:
            name: Collaborator name reported in logs and errors
            call: Pending collaborator call

        Raises:
            UnavailableError: If the call timed out or failed unexpectedly
        """
        try:
            return await asyncio.wait_for(call, timeout=self.collaborator_timeout)
        except DomainError:
            raise
        except asyncio.TimeoutError:
            logfire.error("Collaborator timed out", collaborator=name)
            raise UnavailableError(name, "timed out")
        except Exception as e:
            logfire.error("Collaborator failed", collaborator=name, error=str(e))
            raise UnavailableError(name, str(e)) from e
