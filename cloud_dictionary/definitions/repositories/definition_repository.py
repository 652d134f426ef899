from typing import Any

from pydantic import ValidationError

from cloud_dictionary.definitions.definition_query_composer import (
    NORMALIZED_FIELD,
    DefinitionQuery,
    normalized_fields,
)
from cloud_dictionary.definitions.entities.definition import Definition, WordDefinition
from cloud_dictionary.logging.logger import log
from cloud_dictionary.persistence.async_mongodb_interface import AsyncMongoDbInterface
from cloud_dictionary.persistence.mongodb_async_repository import MongoDbAsyncRepository

_PUBLIC_PROJECTION = {NORMALIZED_FIELD: 0}
_WORD_PROJECTION = {"id": 1, "word": 1}


class DefinitionRepository(MongoDbAsyncRepository):
    """
    Stores definitions together with the case-folded copies of their searchable fields.
    """

    def __init__(self, db_interface: AsyncMongoDbInterface, collection_name: str = "definitions"):
        super().__init__(collection_name, db_interface)

    async def initialize(self) -> None:
        await self.create_indices([("id", 1)], unique=True)
        await self.create_indices([(f"{NORMALIZED_FIELD}.word", 1)])
        await self.create_indices([(f"{NORMALIZED_FIELD}.tag", 1)])

    @staticmethod
    def to_document(definition: Definition) -> dict[str, Any]:
        return {**definition.model_dump(), NORMALIZED_FIELD: normalized_fields(definition)}

    async def normalize_unindexed_definitions(self) -> int:
        """
        Add the case-folded field copies to definitions stored without them, such as seeded or migrated
        data, so that word, tag and search lookups find them. Documents that are not valid definitions
        are left untouched.

        :return: The number of definitions updated.
        """
        unindexed = [document async for document in self.query({NORMALIZED_FIELD: {"$exists": False}})]

        updated = 0
        for document in unindexed:
            try:
                definition = Definition.model_validate(document)
            except ValidationError as e:
                log.warning(f"Document '{document.get('id')}' is not a valid definition and stays unsearchable: {e}")
                continue

            result = await self._collection.update_one(
                {"id": definition.id, NORMALIZED_FIELD: {"$exists": False}},
                {"$set": {NORMALIZED_FIELD: normalized_fields(definition)}},
            )
            updated += result.modified_count

        if updated:
            log.info(f"Added search fields to {updated} definitions in '{self.collection_name}'.")
        return updated

    async def create_definition(self, definition: Definition) -> None:
        await self.create(self.to_document(definition))

    async def replace_definition(self, definition: Definition) -> None:
        await self.replace_one(self.to_document(definition), id=definition.id)

    async def upsert_definition(self, definition: Definition) -> None:
        await self.upsert_one(self.to_document(definition), id=definition.id)

    async def delete_definition(self, definition_id: str) -> None:
        await self.delete_one(id=definition_id)

    async def find_definitions(self, query: DefinitionQuery) -> list[Definition]:
        return [
            Definition.model_validate(document)
            async for document in self.query(query.filter, query.skip, query.limit, _PUBLIC_PROJECTION)
        ]

    async def find_first(self, query: DefinitionQuery) -> Definition | None:
        definitions = await self.find_definitions(DefinitionQuery(query.filter, query.skip, 1))
        return definitions[0] if definitions else None

    async def find_words(self, query: DefinitionQuery) -> list[WordDefinition]:
        return [
            WordDefinition.model_validate(document)
            async for document in self.query(query.filter, query.skip, query.limit, _WORD_PROJECTION)
        ]
