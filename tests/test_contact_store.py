import pytest
from bson import ObjectId

from contact_manager.errors import StoreUnavailable, ValidationFailed
from contact_manager.models.contact import ContactCreate
from contact_manager.utils.validation import IssueType


async def test_create_assigns_id_and_timestamp(store, ada):
    contact = await store.create(ada)
    assert ObjectId.is_valid(contact.id)
    assert contact.created_at.tzinfo is not None
    assert contact.phone == "123-456-7890"
    assert contact.message == ""


async def test_create_then_list_puts_record_first(store, ada):
    await store.create({"name": "Old", "email": "old@example.com", "phone": "0000000000"})
    created = await store.create(ContactCreate(**ada))

    contacts = await store.list()
    assert [c.id for c in contacts].count(created.id) == 1
    assert contacts[0].id == created.id


async def test_list_is_newest_first(store):
    a = await store.create({"name": "A", "email": "a@example.com", "phone": "1111111111"})
    b = await store.create({"name": "B", "email": "b@example.com", "phone": "2222222222"})
    assert [c.id for c in await store.list()] == [b.id, a.id]


async def test_invalid_candidate_is_not_written(store, collection):
    with pytest.raises(ValidationFailed) as excinfo:
        await store.create({"name": "", "email": "bad", "phone": "123"})

    assert set(excinfo.value.field_errors) == {"name", "email", "phone"}
    assert excinfo.value.issues["name"] == IssueType.MISSING_FIELD
    assert str(excinfo.value).startswith("Contact validation failed: name: Name is required")
    assert await collection.count_documents({}) == 0


async def test_delete_removes_only_that_record(store, ada):
    keep = await store.create(ada)
    gone = await store.create({"name": "Bob", "email": "bob@example.com", "phone": "9999999999"})

    assert await store.delete_by_id(gone.id) is True
    assert [c.id for c in await store.list()] == [keep.id]


async def test_delete_missing_id_succeeds_and_changes_nothing(store, ada):
    await store.create(ada)
    before = await store.list()

    assert await store.delete_by_id(str(ObjectId())) is True
    assert await store.delete_by_id("not-an-object-id") is True
    assert await store.list() == before


async def test_delete_twice_same_end_state(store, ada):
    contact = await store.create(ada)
    assert await store.delete_by_id(contact.id) is True
    assert await store.list() == []
    assert await store.delete_by_id(contact.id) is True
    assert await store.list() == []


async def test_unreachable_store(broken_store, ada):
    with pytest.raises(StoreUnavailable):
        await broken_store.list()
    with pytest.raises(StoreUnavailable):
        await broken_store.create(ada)
    with pytest.raises(StoreUnavailable):
        await broken_store.delete_by_id(str(ObjectId()))


async def test_validation_runs_before_store(broken_store):
    with pytest.raises(ValidationFailed):
        await broken_store.create({"name": "x"})
