from cloud_dictionary.definition_of_the_day.repositories.definition_of_the_day_repository import (
    DefinitionOfTheDayRepository,
)
from cloud_dictionary.definitions.definition_query_composer import DefinitionQuery
from cloud_dictionary.definitions.entities.definition import Definition
from cloud_dictionary.logging.logger import log
from cloud_dictionary.persistence.exceptions import EntityNotFoundError


class DefinitionOfTheDayManager:
    """
    Keeps the definition of the day collection down to a single document.

    Replacing the definition of the day deletes the current one before the new one is written,
    so a failure in between leaves the slot empty until the next successful replacement. An
    empty slot is tolerated; two current definitions are not.
    """

    def __init__(self, repository: DefinitionOfTheDayRepository):
        self._repository = repository

    async def get(self) -> Definition | None:
        """
        Get the definition of the day, or None if none has been set.
        """
        current = await self._repository.find_definitions(DefinitionQuery(limit=2))
        if len(current) > 1:
            log.warning(
                f"The '{self._repository.collection_name}' collection holds more than one definition. "
                f"Using '{current[0].id}'; the extra ones are removed on the next update."
            )
        return current[0] if current else None

    async def set(self, definition: Definition) -> None:
        """
        Replace the definition of the day. Safe to retry after a partial failure.
        """
        for current in await self._repository.find_definitions(DefinitionQuery()):
            if current.id == definition.id:
                continue
            try:
                await self._repository.delete_definition(current.id)
            except EntityNotFoundError:
                log.debug(f"Definition of the day '{current.id}' was already removed.")

        await self._repository.upsert_definition(definition)
        log.info(f"Definition of the day set to '{definition.word}' ({definition.id}).")
