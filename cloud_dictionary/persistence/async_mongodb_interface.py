from motor.core import AgnosticDatabase
from motor.motor_asyncio import AsyncIOMotorClient

from cloud_dictionary.configuration.entities.dictionary_config import DbConfig
from cloud_dictionary.logging.logger import log


class AsyncMongoDbInterface:
    """
    Gives asynchronous access to a MongoDB database.
    """

    def __init__(
        self,
        db_config: DbConfig,
        db_client: AsyncIOMotorClient | None = None,
    ):
        self._db_config = db_config

        if db_client is None:
            db_client = AsyncIOMotorClient(
                host=db_config.host,
                port=db_config.port,
                username=db_config.username,
                password=db_config.password,
                serverSelectionTimeoutMS=10000,
            )
        self._db_client = db_client

        self._db: AgnosticDatabase = self._db_client[db_config.db_name]

        log.debug(f"Async Db manager initialized with database '{db_config.db_name}'.")

    def get_db(self) -> AgnosticDatabase:
        """Get the database."""
        return self._db
