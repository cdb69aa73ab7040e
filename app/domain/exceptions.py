"""Domain exceptions raised by helpdesk operations"""


class HelpdeskError(Exception):
    """Base class for every classified operation failure"""

    kind = "error"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(HelpdeskError):
    """Required field missing or empty, or unrecognized enumerated value"""

    kind = "validation_error"


class NotFoundError(HelpdeskError):
    """Referenced entity does not exist, or a top-level listing is empty"""

    kind = "not_found"

    @classmethod
    def for_entity(cls, entity_type: str, entity_id: str) -> "NotFoundError":
        return cls(f"{entity_type} with ID '{entity_id}' not found")


class ConflictError(HelpdeskError):
    """Uniqueness violation"""

    kind = "conflict"


class AuthorizationError(HelpdeskError):
    """Caller's role does not satisfy the operation's gate"""

    kind = "authorization_error"
