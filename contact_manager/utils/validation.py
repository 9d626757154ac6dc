"""
Validation rules for contacts.

Both the API (before anything is written) and the client (before a request is
sent) call `validate`. The API result is the one that counts.
"""
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Union

from contact_manager.models.contact import ContactCreate


class IssueType(str, Enum):
    MISSING_FIELD = "MISSING_FIELD"
    INVALID_FORMAT = "INVALID_FORMAT"


@dataclass
class ValidationResult:
    is_valid: bool
    field_errors: Dict[str, str] = field(default_factory=dict)
    issues: Dict[str, IssueType] = field(default_factory=dict)


# Loose on purpose: something@something.something anywhere in the value
EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")
NON_DIGITS = re.compile(r"\D")
PHONE_DIGITS = 10


def normalize_phone(phone: str) -> str:
    """Strip everything but digits, e.g. "123-456-7890" -> "1234567890"."""
    if not phone:
        return ""
    return NON_DIGITS.sub("", phone)


def _value(candidate: Any, name: str) -> str:
    if isinstance(candidate, Mapping):
        value = candidate.get(name)
    else:
        value = getattr(candidate, name, None)
    return "" if value is None else str(value)


def validate(candidate: Union[ContactCreate, Mapping[str, Any]]) -> ValidationResult:
    """
    Check a candidate contact field by field.

    Args:
        candidate: ContactCreate, a form draft or a plain dict

    Returns:
        ValidationResult with one message per failing field
    """
    errors: Dict[str, str] = {}
    issues: Dict[str, IssueType] = {}

    def fail(name: str, issue: IssueType, message: str):
        errors[name] = message
        issues[name] = issue

    name = _value(candidate, "name")
    if not name.strip():
        fail("name", IssueType.MISSING_FIELD, "Name is required")

    email = _value(candidate, "email")
    if not email.strip():
        fail("email", IssueType.MISSING_FIELD, "Email is required")
    elif not EMAIL_PATTERN.search(email):
        fail("email", IssueType.INVALID_FORMAT, "Email is invalid")

    phone = _value(candidate, "phone")
    if not phone.strip():
        fail("phone", IssueType.MISSING_FIELD, "Phone is required")
    elif len(normalize_phone(phone)) != PHONE_DIGITS:
        fail("phone", IssueType.INVALID_FORMAT, "Phone must be 10 digits")

    return ValidationResult(is_valid=not errors, field_errors=errors, issues=issues)
