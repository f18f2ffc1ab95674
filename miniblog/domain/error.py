"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class InvalidArgumentError(DomainError):
    """Raised when an operation receives a missing or malformed argument."""

    def __init__(self, argument: str, reason: str = "must not be None"):
        self.argument = argument
        super().__init__(f"Invalid argument '{argument}': {reason}")


class NotAuthorizedError(DomainError):
    """Raised when an anonymous caller attempts an operator-only change."""

    def __init__(self, action: str):
        self.action = action
        super().__init__(f"Operator privileges are required to {action}")


class NotSupportedError(DomainError):
    """Raised by operations that are recognised but not implemented."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"{operation} is not supported")


class StorageError(DomainError):
    """Raised when the underlying storage engine fails."""

    def __init__(self, operation: str, detail: str):
        self.operation = operation
        super().__init__(f"Storage failure during {operation}: {detail}")
