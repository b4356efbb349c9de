"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Submitted data is missing or malformed."""

    pass


class UnauthorizedError(DomainError):
    """Raised when a non-admin caller attempts an admin-only operation."""

    def __init__(self, action: str):
        self.action = action
        super().__init__(f"Admin access required to {action}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class StoreError(DomainError):
    """Raised when the backing store fails (connection, constraint, ...)."""

    def __init__(self, operation: str, detail: str):
        self.operation = operation
        self.detail = detail
        super().__init__(f"Store operation '{operation}' failed: {detail}")
