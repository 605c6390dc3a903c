import logging
from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import ConfigurationError, ConnectionFailure, PyMongoError

logger = logging.getLogger(__name__)


def create_mongodb_client(mongo_url: str | None) -> MongoClient | None:
    """Create a MongoDB client and verify it with a ping.

    The caller owns the returned client and is responsible for closing it.

    Returns:
        MongoDB client or None if the URL is missing or the server is unreachable
    """
    if not mongo_url:
        logger.error("[MONGODB] MONGO_URL not configured.")
        return None

    try:
        client = MongoClient(
            mongo_url,
            serverSelectionTimeoutMS=5000,  # 5s timeout for server selection
            connectTimeoutMS=5000,  # 5s timeout for initial connection
            socketTimeoutMS=30000,  # 30s timeout for operations
            maxPoolSize=10,
            minPoolSize=0,   # Don't maintain idle connections
            maxIdleTimeMS=30000,
            waitQueueTimeoutMS=10000,  # Wait up to 10s for available connection
            retryWrites=True,
            retryReads=True,
        )
    except (ConfigurationError, ValueError) as e:
        logger.error(f"[MONGODB] Invalid connection string: {str(e)[:200]}")
        return None

    try:
        client.admin.command('ping')  # Verify connection works
    except (ConnectionFailure, PyMongoError) as e:
        logger.error(f"[MONGODB] Initial connection failed: {str(e)[:200]}")
        client.close()
        return None

    logger.info("[MONGODB] Connected successfully")
    return client


def get_database(client: MongoClient, default_name: str) -> Database:
    """Return the database named in the connection URL, or default_name."""
    return client.get_default_database(default=default_name)


def ping(client: MongoClient | None) -> bool:
    """Return True if the server answers a ping."""
    if client is None:
        return False
    try:
        client.admin.command('ping')
        return True
    except PyMongoError as e:
        logger.warning(f"[MONGODB] Ping failed: {str(e)[:200]}")
        return False
