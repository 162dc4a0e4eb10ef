"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error (an argument violates a domain rule)."""

    pass


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to modify content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class UnavailableError(DomainError):
    """Raised when a collaborator could not be reached."""

    def __init__(self, collaborator: str, reason: str):
        self.collaborator = collaborator
        self.reason = reason
        super().__init__(f"{collaborator} unavailable: {reason}")


class CorruptedDataError(DomainError):
    """Raised when stored data breaks a structural invariant.

    For comments this means a reply chain that loops back on itself.
    """

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"Corrupted {resource} structure at {identifier}")


class AuthenticationError(DomainError):
    """Raised when credentials do not match a registered user."""

    pass
