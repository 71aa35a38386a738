"""Custom exception hierarchy for contract-gen."""


class ContractGenError(Exception):
    """Base exception for all contract-gen errors."""


class FieldValidationError(ContractGenError):
    """Raised when step input fails validation.

    Parameters
    ----------
    errors : dict[str, list[str]]
        Field path -> messages.
    """

    def __init__(self, errors: dict[str, list[str]]) -> None:
        self.errors = errors
        fields = ", ".join(sorted(errors)) or "<none>"
        super().__init__(f"Invalid fields: {fields}")


class AuthorizationError(ContractGenError):
    """Raised when no authenticated identity is available."""


class UniquenessConflictError(ContractGenError):
    """Raised when a tax id is already registered to another customer."""

    def __init__(self, message: str, field: str = "tax_id") -> None:
        self.field = field
        super().__init__(message)


class MissingPrerequisiteError(ContractGenError):
    """Raised when a dependent step is saved before the customer exists."""


class StorageError(ContractGenError):
    """Raised when a storage operation fails."""


class RecordNotFoundError(StorageError):
    """Raised when a referenced record does not exist."""


class UniqueConstraintViolation(StorageError):
    """Raised by storage backends when a unique column collides."""

    def __init__(self, table: str, column: str, value: str) -> None:
        self.table = table
        self.column = column
        self.value = value
        super().__init__(f"{table}_{column}_key: {value} already exists")


class ComposerError(ContractGenError):
    """Raised when a document cannot be composed at all."""


class ConfigurationError(ContractGenError):
    """Raised when configuration is invalid or missing."""
