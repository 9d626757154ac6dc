"""
Client-side UI state.

`ClientState` is a frozen snapshot; every change goes through one of the
transition functions below, which return a new snapshot.
"""
from dataclasses import dataclass, field, replace, asdict
from typing import Dict, Optional, Tuple

from contact_manager.models.contact import Contact
from contact_manager.utils.validation import validate

SUCCESS_MESSAGE = "Contact added successfully!"
SUCCESS_BANNER_SECONDS = 5.0

DRAFT_FIELDS = ("name", "email", "phone", "message")


@dataclass(frozen=True)
class ContactDraft:
    name: str = ""
    email: str = ""
    phone: str = ""
    message: str = ""

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class ClientState:
    contacts: Tuple[Contact, ...] = ()
    draft: ContactDraft = field(default_factory=ContactDraft)
    errors: Dict[str, str] = field(default_factory=dict)
    success_message: Optional[str] = None
    success_expires_at: Optional[float] = None
    last_error: Optional[str] = None


def with_contacts(state: ClientState, contacts) -> ClientState:
    return replace(state, contacts=tuple(contacts))


def edit_field(state: ClientState, name: str, value: str) -> ClientState:
    """Update one draft field and drop any error shown for it."""
    if name not in DRAFT_FIELDS:
        raise KeyError(f"Unknown contact field: {name}")
    errors = {key: msg for key, msg in state.errors.items() if key != name}
    return replace(state, draft=replace(state.draft, **{name: value}), errors=errors)


def with_errors(state: ClientState, errors: Dict[str, str]) -> ClientState:
    return replace(state, errors=dict(errors))


def submitted(state: ClientState, now: float) -> ClientState:
    return replace(
        state,
        draft=ContactDraft(),
        errors={},
        success_message=SUCCESS_MESSAGE,
        success_expires_at=now + SUCCESS_BANNER_SECONDS,
        last_error=None,
    )


def failed(state: ClientState, message: str) -> ClientState:
    return replace(state, last_error=message)


def visible_success(state: ClientState, now: float) -> Optional[str]:
    if state.success_message is None or state.success_expires_at is None:
        return None
    if now >= state.success_expires_at:
        return None
    return state.success_message


def can_submit(state: ClientState) -> bool:
    return validate(state.draft.to_dict()).is_valid
