from abc import ABC, abstractmethod
from collections.abc import AsyncIterator
from typing import Any


class AbstractAsyncRepository(ABC):
    """
    Abstract class for a repository that provides keyed CRUD and filtered, paginated queries
    over a single document collection.
    """

    @abstractmethod
    async def create(self, entity: dict[str, Any]) -> None:
        pass

    @abstractmethod
    async def count(self, **query) -> int:
        pass

    @abstractmethod
    async def get_one(self, **query) -> dict[str, Any] | None:
        pass

    @abstractmethod
    def query(
        self,
        query_filter: dict[str, Any] | None = None,
        skip: int | None = None,
        limit: int | None = None,
        projection: dict[str, int] | None = None,
    ) -> AsyncIterator[dict[str, Any]]:
        pass

    @abstractmethod
    async def replace_one(self, entity: dict[str, Any], **query) -> None:
        pass

    @abstractmethod
    async def upsert_one(self, entity: dict[str, Any], **query) -> None:
        pass

    @abstractmethod
    async def delete_one(self, **query) -> None:
        pass
