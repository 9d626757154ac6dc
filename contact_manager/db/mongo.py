from motor.motor_asyncio import AsyncIOMotorClient

from contact_manager import config
from contact_manager.utils.logging_config import get_logger

logger = get_logger(__name__)

_client: AsyncIOMotorClient = None


def get_client() -> AsyncIOMotorClient:
    global _client
    if _client is None:
        _client = AsyncIOMotorClient(config.MONGO_URI, serverSelectionTimeoutMS=config.MONGO_TIMEOUT_MS)
    return _client


def get_database():
    return get_client()[config.MONGO_DB_NAME]


def get_contacts_collection():
    return get_database()[config.MONGO_COLLECTION]


async def ping() -> bool:
    try:
        await get_client().admin.command("ping")
        logger.info("MongoDB connected", extra={"database": config.MONGO_DB_NAME})
        return True
    except Exception:
        logger.exception("MongoDB failed to connect")
        return False


def close_client():
    global _client
    if _client is not None:
        _client.close()
        _client = None
