from cloud_dictionary.counter.entities.counter import COUNTER_ID, Counter
from cloud_dictionary.persistence.async_mongodb_interface import AsyncMongoDbInterface
from cloud_dictionary.persistence.mongodb_async_repository import MongoDbAsyncRepository


class CounterRepository(MongoDbAsyncRepository):
    def __init__(self, db_interface: AsyncMongoDbInterface, collection_name: str = "counter"):
        super().__init__(collection_name, db_interface)

    async def initialize(self) -> None:
        await self.create_indices([("id", 1)], unique=True)

    async def get_counter(self) -> Counter | None:
        document = await self.get_one(id=COUNTER_ID)
        return Counter.model_validate(document) if document else None

    async def replace_counter(self, counter: Counter, expected_count: int) -> None:
        """
        Replace the counter only if it still holds the expected count.

        :raises EntityNotFoundError: If the counter is gone or its count has changed since it was read.
        """
        await self.replace_one(counter.model_dump(), id=counter.id, count=expected_count)

    async def upsert_counter(self, counter: Counter) -> None:
        await self.upsert_one(counter.model_dump(), id=counter.id)
