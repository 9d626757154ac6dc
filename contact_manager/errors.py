from typing import Dict, Optional


class ContactManagerError(Exception):
    pass


class ValidationFailed(ContactManagerError):
    """Raised when a candidate contact is rejected by `validate`."""

    def __init__(self, field_errors: Dict[str, str], issues: Optional[dict] = None):
        self.field_errors = dict(field_errors)
        self.issues = dict(issues or {})
        details = ", ".join(f"{field}: {msg}" for field, msg in self.field_errors.items())
        super().__init__(f"Contact validation failed: {details}")


class StoreUnavailable(ContactManagerError):
    """The document store could not be reached or refused the operation."""


class ApiError(ContactManagerError):
    """A non-2xx response seen by the client."""

    def __init__(self, status_code: int, message: str, errors: Optional[dict] = None):
        self.status_code = status_code
        self.message = message
        self.errors = dict(errors or {})
        super().__init__(f"{status_code}: {message}")
