import pytest
from mongomock_motor import AsyncMongoMockClient

from cloud_dictionary.configuration.entities.dictionary_config import CollectionsConfig, DbConfig
from cloud_dictionary.counter.counter_maintainer import CounterMaintainer
from cloud_dictionary.counter.repositories.counter_repository import CounterRepository
from cloud_dictionary.definition_of_the_day.definition_of_the_day_manager import DefinitionOfTheDayManager
from cloud_dictionary.definition_of_the_day.repositories.definition_of_the_day_repository import (
    DefinitionOfTheDayRepository,
)
from cloud_dictionary.definitions.entities.definition import Author, Definition
from cloud_dictionary.definitions.repositories.definition_repository import DefinitionRepository
from cloud_dictionary.dictionary_store import DictionaryStore
from cloud_dictionary.logging.logger import log
from cloud_dictionary.persistence.async_mongodb_interface import AsyncMongoDbInterface
from cloud_dictionary.utils.sampling import SamplingSource

log.set_level("INFO")


class SequenceSamplingSource(SamplingSource):
    """Returns preset values in order and records every requested range."""

    def __init__(self, *values: int):
        self.values = list(values)
        self.requested_stops: list[int] = []

    def randrange(self, stop: int) -> int:
        self.requested_stops.append(stop)
        value = self.values.pop(0) if self.values else 0
        if not 0 <= value < stop:
            raise ValueError(f"Preset value {value} is outside [0, {stop}).")
        return value


def make_definition(
    definition_id: str,
    word: str,
    content: str = "",
    tag: str = "",
    abbreviation: str = "",
    author: str = "",
) -> Definition:
    return Definition(
        id=definition_id,
        word=word,
        content=content or f"The meaning of {word}.",
        tag=tag,
        abbreviation=abbreviation,
        author=Author(name=author),
    )


@pytest.fixture
def collections():
    return CollectionsConfig()


@pytest.fixture
def db_interface():
    return AsyncMongoDbInterface(DbConfig(db_name="test-cloud-dictionary"), db_client=AsyncMongoMockClient())


@pytest.fixture
async def definition_repository(db_interface, collections):
    repository = DefinitionRepository(db_interface, collections.definitions)
    await repository.initialize()
    return repository


@pytest.fixture
async def counter_repository(db_interface, collections):
    repository = CounterRepository(db_interface, collections.counter)
    await repository.initialize()
    return repository


@pytest.fixture
async def definition_of_the_day_repository(db_interface, collections):
    repository = DefinitionOfTheDayRepository(db_interface, collections.definition_of_the_day)
    await repository.initialize()
    return repository


@pytest.fixture
def counter_maintainer(counter_repository, definition_repository):
    return CounterMaintainer(counter_repository, definition_repository)


@pytest.fixture
def definition_of_the_day_manager(definition_of_the_day_repository):
    return DefinitionOfTheDayManager(definition_of_the_day_repository)


@pytest.fixture
def sampling_source():
    return SequenceSamplingSource()


@pytest.fixture
async def unprovisioned_store(db_interface, collections, sampling_source):
    store = DictionaryStore(db_interface, collections, sampling_source)
    await store.initialize()
    return store


@pytest.fixture
async def dictionary_store(unprovisioned_store):
    await unprovisioned_store.reconcile_definition_count()
    return unprovisioned_store
