from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime, timezone


# What the form / POST body carries
class ContactCreate(BaseModel):
    name: Optional[str] = ""
    email: Optional[str] = ""
    phone: Optional[str] = ""
    message: Optional[str] = ""


# A stored contact, as returned by the API
class Contact(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    email: str
    phone: str
    message: str = ""
    created_at: datetime = Field(alias="createdAt")

    @classmethod
    def from_document(cls, doc: dict) -> "Contact":
        created_at = doc["createdAt"]
        # Mongo hands back naive UTC datetimes
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)
        return cls(
            id=str(doc["_id"]),
            name=doc.get("name", ""),
            email=doc.get("email", ""),
            phone=doc.get("phone", ""),
            message=doc.get("message") or "",
            created_at=created_at,
        )

    def to_json(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
