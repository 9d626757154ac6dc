import httpx
from typing import List, Mapping, Any

from contact_manager import config
from contact_manager.errors import ApiError
from contact_manager.models.contact import Contact


class ContactsApiClient:
    """Thin async wrapper over the /contacts endpoints."""

    def __init__(self, base_url: str = None, client: httpx.AsyncClient = None):
        self.base_url = (base_url or config.API_URL).rstrip("/")
        self._client = client or httpx.AsyncClient()

    async def aclose(self):
        await self._client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()

    @staticmethod
    def _raise_for_status(response: httpx.Response):
        if response.is_success:
            return
        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}
        raise ApiError(response.status_code, body.get("message") or response.text, body.get("errors"))

    async def list_contacts(self) -> List[Contact]:
        response = await self._client.get(self.base_url)
        self._raise_for_status(response)
        return [Contact.model_validate(item) for item in response.json()]

    async def create_contact(self, draft: Mapping[str, Any]) -> Contact:
        response = await self._client.post(self.base_url, json=dict(draft))
        self._raise_for_status(response)
        return Contact.model_validate(response.json())

    async def delete_contact(self, contact_id: str) -> str:
        response = await self._client.delete(f"{self.base_url}/{contact_id}")
        self._raise_for_status(response)
        return response.json().get("message", "")
