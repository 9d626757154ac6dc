from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from contact_manager.db.contact_store import ContactStore
from contact_manager.db.mongo import get_contacts_collection
from contact_manager.errors import ValidationFailed
from contact_manager.models.contact import ContactCreate
from contact_manager.utils.logging_config import get_logger

logger = get_logger(__name__)

router = APIRouter()


def get_contact_store() -> ContactStore:
    return ContactStore(get_contacts_collection())


# List all contacts, newest first
@router.get("/contacts")
async def list_contacts(store: ContactStore = Depends(get_contact_store)):
    try:
        contacts = await store.list()
        return JSONResponse(content=[contact.to_json() for contact in contacts])
    except Exception as e:
        logger.exception("Listing contacts failed")
        return JSONResponse(content={"message": str(e)}, status_code=500)


# Save a contact
@router.post("/contacts")
async def create_contact(body: ContactCreate, store: ContactStore = Depends(get_contact_store)):
    try:
        contact = await store.create(body)
        return JSONResponse(content=contact.to_json(), status_code=201)
    except ValidationFailed as e:
        logger.warning("Contact rejected", extra={"errors": e.field_errors})
        return JSONResponse(content={"message": str(e), "errors": e.field_errors}, status_code=400)
    except Exception as e:
        logger.exception("Creating contact failed")
        return JSONResponse(content={"message": str(e)}, status_code=500)


# Delete a contact; missing ids still succeed
@router.delete("/contacts/{contact_id}")
async def delete_contact(contact_id: str, store: ContactStore = Depends(get_contact_store)):
    try:
        await store.delete_by_id(contact_id)
        return JSONResponse(content={"message": "Contact deleted!"})
    except Exception as e:
        logger.exception("Deleting contact failed")
        return JSONResponse(content={"message": str(e)}, status_code=500)
