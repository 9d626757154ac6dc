"""
MongoDB access for contacts.
"""
from datetime import datetime, timezone
from typing import List, Union, Mapping, Any

from bson import ObjectId
from bson.errors import InvalidId
from pymongo.errors import PyMongoError

from contact_manager.errors import StoreUnavailable, ValidationFailed
from contact_manager.models.contact import Contact, ContactCreate
from contact_manager.utils.logging_config import get_logger
from contact_manager.utils.validation import validate

logger = get_logger(__name__)

# Newest first; _id breaks ties between inserts in the same millisecond
LIST_ORDER = [("createdAt", -1), ("_id", -1)]


def _now() -> datetime:
    # BSON dates only keep milliseconds
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


class ContactStore:
    """Repository over a single Motor collection."""

    def __init__(self, collection):
        self.collection = collection

    async def list(self) -> List[Contact]:
        try:
            contacts = []
            async for doc in self.collection.find().sort(LIST_ORDER):
                contacts.append(Contact.from_document(doc))
            return contacts
        except PyMongoError as e:
            raise StoreUnavailable(str(e)) from e

    async def create(self, candidate: Union[ContactCreate, Mapping[str, Any]]) -> Contact:
        """
        Validate and insert a new contact.

        Raises:
            ValidationFailed: candidate broke one or more field rules
            StoreUnavailable: the insert did not reach the database
        """
        if isinstance(candidate, ContactCreate):
            candidate = candidate.model_dump()

        result = validate(candidate)
        if not result.is_valid:
            raise ValidationFailed(result.field_errors, result.issues)

        doc = {
            "name": str(candidate["name"]).strip(),
            "email": str(candidate["email"]).strip(),
            "phone": str(candidate["phone"]).strip(),
            "message": str(candidate.get("message") or ""),
            "createdAt": _now(),
        }

        try:
            inserted = await self.collection.insert_one(doc)
        except PyMongoError as e:
            raise StoreUnavailable(str(e)) from e

        doc["_id"] = inserted.inserted_id
        logger.info("Contact created", extra={"contact_id": str(inserted.inserted_id)})
        return Contact.from_document(doc)

    async def delete_by_id(self, contact_id: str) -> bool:
        """Delete one contact. Unknown or malformed ids count as already deleted."""
        try:
            object_id = ObjectId(contact_id)
        except (InvalidId, TypeError):
            logger.info("Delete of malformed id ignored", extra={"contact_id": contact_id})
            return True

        try:
            result = await self.collection.delete_one({"_id": object_id})
        except PyMongoError as e:
            raise StoreUnavailable(str(e)) from e

        logger.info(
            "Contact deleted",
            extra={"contact_id": contact_id, "deleted_count": result.deleted_count},
        )
        return True
