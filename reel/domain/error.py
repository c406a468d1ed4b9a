"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Raised when user input is rejected before it reaches the network."""

    pass


class UnsupportedActionError(DomainError):
    """Raised when an action has no backend endpoint for the given target."""

    def __init__(self, action: str, target: str):
        super().__init__(f"Cannot {action} a {target}")


class NotFoundError(DomainError):
    """Raised when a target entity is not present in local state."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
