import time

import httpx

from contact_manager.client import state as ui
from contact_manager.client.api import ContactsApiClient
from contact_manager.errors import ApiError
from contact_manager.utils.logging_config import get_logger
from contact_manager.utils.validation import validate

logger = get_logger(__name__)


class ContactManager:
    """
    Drives the contact form and list against the API.

    Requests are never retried. A failed request is logged and kept in
    `state.last_error`; the list is left as it was.
    """

    def __init__(self, api: ContactsApiClient, clock=time.monotonic):
        self.api = api
        self.clock = clock
        self.state = ui.ClientState()

    def edit(self, name: str, value: str) -> ui.ClientState:
        self.state = ui.edit_field(self.state, name, value)
        return self.state

    @property
    def can_submit(self) -> bool:
        return ui.can_submit(self.state)

    @property
    def success_message(self):
        return ui.visible_success(self.state, self.clock())

    async def load(self) -> ui.ClientState:
        try:
            contacts = await self.api.list_contacts()
        except (httpx.HTTPError, ApiError) as e:
            logger.error("Error fetching contacts: %s", e)
            self.state = ui.failed(self.state, str(e))
            return self.state
        self.state = ui.with_contacts(self.state, contacts)
        return self.state

    async def submit(self) -> bool:
        draft = self.state.draft.to_dict()
        result = validate(draft)
        if not result.is_valid:
            self.state = ui.with_errors(self.state, result.field_errors)
            return False

        try:
            await self.api.create_contact(draft)
        except ApiError as e:
            logger.error("Error adding contact: %s", e)
            self.state = ui.failed(ui.with_errors(self.state, e.errors), e.message)
            return False
        except httpx.HTTPError as e:
            logger.error("Error adding contact: %s", e)
            self.state = ui.failed(self.state, str(e))
            return False

        self.state = ui.submitted(self.state, self.clock())
        await self.load()
        return True

    async def delete(self, contact_id: str) -> bool:
        try:
            await self.api.delete_contact(contact_id)
        except (httpx.HTTPError, ApiError) as e:
            logger.error("Error deleting contact: %s", e)
            self.state = ui.failed(self.state, str(e))
            return False
        await self.load()
        return True
