"""Shared exceptions for service layer operations."""


class EntityNotFoundError(Exception):
    """Raised when a write targets an entity that does not exist."""

    def __init__(self, entity_name: str, entity_id: int) -> None:
        self.entity_name = entity_name
        self.entity_id = entity_id
        super().__init__(f"{entity_name} not found: {entity_id}")


class EntityAccessDeniedError(Exception):
    """
    Raised when a write targets an entity owned by another user.

    Reads never raise this: a non-owner reading by ID sees the entity as absent.
    """

    def __init__(self, entity_name: str, entity_id: int) -> None:
        self.entity_name = entity_name
        self.entity_id = entity_id
        super().__init__(f"Access denied to {entity_name} {entity_id}")


class CredentialsTakenError(Exception):
    """
    Raised when an account cannot be created or renamed because its email is in use.

    The message does not say which field collided.
    """

    def __init__(self) -> None:
        super().__init__("Credentials taken")


class CredentialsIncorrectError(Exception):
    """Raised on signin with an unknown email or a wrong password (same message for both)."""

    def __init__(self) -> None:
        super().__init__("Credentials incorrect")
