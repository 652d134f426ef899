from collections.abc import AsyncIterator
from typing import Any

from pymongo import ASCENDING
from pymongo.errors import DuplicateKeyError

from cloud_dictionary.persistence.abstract_async_repository import AbstractAsyncRepository
from cloud_dictionary.persistence.async_mongodb_interface import AsyncMongoDbInterface
from cloud_dictionary.persistence.exceptions import EntityConflictError, EntityNotFoundError

_HIDDEN_FIELDS = {"_id": 0}


class MongoDbAsyncRepository(AbstractAsyncRepository):
    """
    Provides CRUD operations for a MongoDB collection.
    """

    def __init__(self, collection_name: str, db_interface: AsyncMongoDbInterface):
        self._collection_name = collection_name
        self._collection = db_interface.get_db().get_collection(collection_name)

    @property
    def collection_name(self) -> str:
        return self._collection_name

    async def create_indices(self, indices: list[tuple[str, int]], unique: bool = False) -> None:
        """
        Create indices on the collection if they don't already exist.

        :param indices: List of tuples of field names and order (1 for ascending, -1 for descending).
        :param unique: Whether the index should be unique.
        """
        index_name = "_".join(f"{field}_{order}" for field, order in indices)

        if index_name not in await self._collection.index_information():
            await self._collection.create_index(indices, unique=unique, name=index_name)

    async def create(self, entity: dict[str, Any]) -> None:
        """
        Create a new entity in the collection.

        :param entity: The entity to create.
        :raises EntityConflictError: If an entity with the same unique key already exists.
        """
        try:
            await self._collection.insert_one(dict(entity))
        except DuplicateKeyError as e:
            raise EntityConflictError(
                f"Entity with id '{entity.get('id')}' already exists in '{self._collection_name}'."
            ) from e

    async def count(self, **kwargs) -> int:
        """
        Count the number of entities that match the query in the collection.

        :param kwargs: Query parameters.
        :return: The number of entities.
        """
        return await self._collection.count_documents(kwargs)

    async def get_one(self, **kwargs) -> dict[str, Any] | None:
        """
        Get a single entity from the collection.

        :param kwargs: Query parameters.
        :return: The entity as a dictionary, or None if nothing matches.
        """
        return await self._collection.find_one(kwargs, _HIDDEN_FIELDS)

    async def query(
        self,
        query_filter: dict[str, Any] | None = None,
        skip: int | None = None,
        limit: int | None = None,
        projection: dict[str, int] | None = None,
    ) -> AsyncIterator[dict[str, Any]]:
        """
        Lazily iterate over the entities matching a filter, in insertion order.

        Each call issues a fresh query, so iteration can be restarted by calling again.

        :param query_filter: A MongoDB filter document.
        :param skip: Number of matching entities to skip. None applies no offset.
        :param limit: Maximum number of entities to return. None applies no bound.
        :param projection: Optional MongoDB projection. The internal '_id' field is always excluded.
        """
        cursor = self._collection.find(
            query_filter or {},
            {**(projection or {}), **_HIDDEN_FIELDS},
            sort=[("_id", ASCENDING)],
            skip=skip or 0,
            limit=limit or 0,
        )
        async for entity in cursor:
            yield entity

    async def replace_one(self, entity: dict[str, Any], **kwargs) -> None:
        """
        Replace an existing entity in the collection.

        :param entity: The full replacement entity.
        :param kwargs: Query parameters selecting the entity to replace.
        :raises EntityNotFoundError: If no entity matches the query.
        """
        result = await self._collection.replace_one(kwargs, entity)
        if result.matched_count == 0:
            raise EntityNotFoundError(f"No entity matching {kwargs} in '{self._collection_name}'.")

    async def upsert_one(self, entity: dict[str, Any], **kwargs) -> None:
        """
        Replace an entity in the collection, inserting it if nothing matches.

        :param entity: The full replacement entity.
        :param kwargs: Query parameters selecting the entity to replace.
        """
        await self._collection.replace_one(kwargs, entity, upsert=True)

    async def delete_one(self, **kwargs) -> None:
        """
        Delete a single entity from the collection.

        :param kwargs: Query parameters.
        :raises EntityNotFoundError: If no entity matches the query.
        """
        result = await self._collection.delete_one(kwargs)
        if result.deleted_count == 0:
            raise EntityNotFoundError(f"No entity matching {kwargs} in '{self._collection_name}'.")
