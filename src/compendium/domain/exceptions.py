"""Domain exceptions for the problem tracker."""


class CompendiumError(Exception):
    """Base exception for all tracker errors."""

    kind = "compendium_error"

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class ValidationError(CompendiumError, ValueError):
    """Required field missing or malformed."""

    kind = "validation_error"


class NotFoundError(CompendiumError, LookupError):
    """Mutation targets an id that is not in the repository."""

    kind = "not_found"

    def __init__(self, record_id: object, what: str = "Record"):
        super().__init__(f"{what} not found: {record_id}")
        self.record_id = record_id


class DuplicateIdError(CompendiumError):
    """Record id already present in the repository."""

    kind = "duplicate_id"

    def __init__(self, record_id: object):
        super().__init__(f"Duplicate record id: {record_id}")
        self.record_id = record_id


class TransportError(CompendiumError):
    """Backend call failed or returned a non-success status."""

    kind = "transport_error"

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ImportFormatError(CompendiumError, ValueError):
    """Import payload is not a sequence of records."""

    kind = "import_format_error"
