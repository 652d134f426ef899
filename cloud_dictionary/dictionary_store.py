from cloud_dictionary.configuration.entities.dictionary_config import CollectionsConfig, DictionaryConfig
from cloud_dictionary.counter.counter_maintainer import CounterMaintainer
from cloud_dictionary.counter.repositories.counter_repository import CounterRepository
from cloud_dictionary.definition_of_the_day.definition_of_the_day_manager import DefinitionOfTheDayManager
from cloud_dictionary.definition_of_the_day.repositories.definition_of_the_day_repository import (
    DefinitionOfTheDayRepository,
)
from cloud_dictionary.definitions.definition_query_composer import DefinitionQueryComposer
from cloud_dictionary.definitions.entities.definition import Definition, WordDefinition
from cloud_dictionary.definitions.exceptions import DefinitionExistsError, DefinitionNotFoundError
from cloud_dictionary.definitions.random_definition_selector import RandomDefinitionSelector
from cloud_dictionary.definitions.repositories.definition_repository import DefinitionRepository
from cloud_dictionary.logging.logger import log
from cloud_dictionary.persistence.async_mongodb_interface import AsyncMongoDbInterface
from cloud_dictionary.persistence.exceptions import EntityConflictError, EntityNotFoundError
from cloud_dictionary.utils.sampling import RandomSamplingSource, SamplingSource


class DictionaryStore:
    """
    The data-access facade of the dictionary. Provides definition CRUD, lookups, search and pagination,
    keeps the mirrored definition count up to date, picks random definitions and manages the
    definition of the day.
    """

    def __init__(
        self,
        db_interface: AsyncMongoDbInterface,
        collections: CollectionsConfig | None = None,
        sampling_source: SamplingSource | None = None,
    ):
        collections = collections or CollectionsConfig()

        self._definitions = DefinitionRepository(db_interface, collections.definitions)
        self._counters = CounterRepository(db_interface, collections.counter)
        self._definition_of_the_day_repository = DefinitionOfTheDayRepository(
            db_interface, collections.definition_of_the_day
        )

        self._queries = DefinitionQueryComposer()
        self._counter = CounterMaintainer(self._counters, self._definitions)
        self._definition_of_the_day = DefinitionOfTheDayManager(self._definition_of_the_day_repository)
        self._random_selector = RandomDefinitionSelector(
            self._definitions, self._counter, self._queries, sampling_source or RandomSamplingSource()
        )

    @classmethod
    def from_config(cls, config: DictionaryConfig, sampling_source: SamplingSource | None = None) -> "DictionaryStore":
        return cls(AsyncMongoDbInterface(config.db), config.collections, sampling_source)

    async def initialize(self) -> None:
        """
        Create the indices of the dictionary collections. Does not provision the counter.
        """
        await self._definitions.initialize()
        await self._counters.initialize()
        await self._definition_of_the_day_repository.initialize()
        log.debug("Dictionary store initialized.")

    async def get_definitions(self, skip: int | None = None, batch_size: int | None = None) -> list[Definition]:
        return await self._definitions.find_definitions(self._queries.all_definitions(skip, batch_size))

    async def get_words(self, skip: int | None = None, batch_size: int | None = None) -> list[WordDefinition]:
        return await self._definitions.find_words(self._queries.all_definitions(skip, batch_size))

    async def get_definition(self, definition_id: str) -> Definition | None:
        return await self._definitions.find_first(self._queries.by_id(definition_id))

    async def get_definition_by_word(self, word: str) -> Definition | None:
        """
        Get the definition of a word, ignoring case. If several definitions share the word, the
        first one stored is returned.
        """
        return await self._definitions.find_first(self._queries.by_word(word))

    async def get_definitions_by_tag(
        self,
        tag: str,
        skip: int | None = DefinitionQueryComposer.TAG_DEFAULT_SKIP,
        batch_size: int | None = DefinitionQueryComposer.TAG_DEFAULT_BATCH_SIZE,
    ) -> list[Definition]:
        return await self._definitions.find_definitions(self._queries.by_tag(tag, skip, batch_size))

    async def get_definitions_by_search(
        self,
        term: str,
        skip: int | None = DefinitionQueryComposer.SEARCH_DEFAULT_SKIP,
        batch_size: int | None = DefinitionQueryComposer.SEARCH_DEFAULT_BATCH_SIZE,
    ) -> list[Definition]:
        return await self._definitions.find_definitions(self._queries.by_search(term, skip, batch_size))

    async def add_definition(self, definition: Definition) -> None:
        """
        Store a new definition and count it.

        :raises DefinitionExistsError: If a definition with the same id exists. The count is left unchanged.
        :raises CounterMissingError: If the counter is not provisioned. The definition stays stored.
        """
        try:
            await self._definitions.create_definition(definition)
        except EntityConflictError as e:
            raise DefinitionExistsError(f"Definition '{definition.id}' already exists.") from e

        try:
            await self._counter.increment()
        except Exception:
            log.error(f"Definition '{definition.id}' was added but the counter was not incremented.")
            raise

    async def update_definition(self, definition: Definition) -> None:
        """
        Replace a stored definition with the given one, matched by id.

        :raises DefinitionNotFoundError: If no definition has that id.
        """
        try:
            await self._definitions.replace_definition(definition)
        except EntityNotFoundError as e:
            raise DefinitionNotFoundError(f"Definition '{definition.id}' does not exist.") from e

    async def delete_definition(self, definition_id: str) -> None:
        """
        Delete a definition and uncount it.

        :raises DefinitionNotFoundError: If no definition has that id. The count is left unchanged.
        :raises CounterMissingError: If the counter is not provisioned. The definition stays deleted.
        """
        try:
            await self._definitions.delete_definition(definition_id)
        except EntityNotFoundError as e:
            raise DefinitionNotFoundError(f"Definition '{definition_id}' does not exist.") from e

        try:
            await self._counter.decrement()
        except Exception:
            log.error(f"Definition '{definition_id}' was deleted but the counter was not decremented.")
            raise

    async def get_definition_count(self) -> int:
        return await self._counter.get_count()

    async def reconcile_definition_count(self) -> int:
        """
        Overwrite the mirrored count with the actual number of definitions, provisioning the counter
        if needed. Definitions stored without their case-folded search fields get them first.

        :return: The actual number of definitions.
        """
        await self._definitions.normalize_unindexed_definitions()
        _, actual = await self._counter.reconcile()
        return actual

    async def get_random_definition(self) -> Definition | None:
        return await self._random_selector.get_random_definition()

    async def get_definition_of_the_day(self) -> Definition | None:
        return await self._definition_of_the_day.get()

    async def set_definition_of_the_day(self, definition: Definition) -> None:
        await self._definition_of_the_day.set(definition)
