from cloud_dictionary.definitions.repositories.definition_repository import DefinitionRepository
from cloud_dictionary.persistence.async_mongodb_interface import AsyncMongoDbInterface


class DefinitionOfTheDayRepository(DefinitionRepository):
    def __init__(self, db_interface: AsyncMongoDbInterface, collection_name: str = "definition_of_the_day"):
        super().__init__(db_interface, collection_name)

    async def initialize(self) -> None:
        await self.create_indices([("id", 1)], unique=True)
