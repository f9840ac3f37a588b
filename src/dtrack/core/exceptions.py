"""Application-level exceptions."""


class AppError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class ValidationError(AppError):
    """Raised when input validation fails."""

    def __init__(self, message: str):
        super().__init__(message, code="VALIDATION_ERROR")


class NotFoundError(AppError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        super().__init__(f"{resource} not found: {identifier}", code="NOT_FOUND")


class AuthorizationError(AppError):
    """Raised when the caller may not act on the requested data."""

    def __init__(self, message: str = "Caller is not authorized"):
        super().__init__(message, code="UNAUTHORIZED")


class ConflictError(AppError):
    """Raised when a write would break a uniqueness or capacity rule."""

    def __init__(self, message: str, code: str = "CONFLICT"):
        super().__init__(message, code=code)


class AlreadyExistsError(ConflictError):
    """Raised when an equal entry is already stored for the owner."""

    def __init__(self, resource: str, identifier: str):
        super().__init__(
            f"{resource} already exists: {identifier}",
            code="ALREADY_EXISTS",
        )


class CapacityExceededError(ConflictError):
    """Raised when an owner's collection is already at its entry limit."""

    def __init__(self, resource: str, limit: int):
        super().__init__(
            f"Maximum number of {resource} reached ({limit})",
            code="CAPACITY_EXCEEDED",
        )


class TransactionIdConflictError(ConflictError):
    """Raised when a custom transaction id is already taken."""

    def __init__(self, transaction_id: str):
        super().__init__(
            f"Transaction id already exists: {transaction_id}",
            code="TRANSACTION_ID_CONFLICT",
        )


class ValueTooLargeError(ConflictError):
    """Raised when a serialized aggregate exceeds its partition's size bound."""

    def __init__(self, partition: str, size: int, max_size: int):
        super().__init__(
            f"Serialized {partition} value is {size} bytes, limit is {max_size}",
            code="VALUE_TOO_LARGE",
        )
        self.size = size
        self.max_size = max_size
