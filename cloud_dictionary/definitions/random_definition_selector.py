from cloud_dictionary.counter.counter_maintainer import CounterMaintainer
from cloud_dictionary.definitions.definition_query_composer import DefinitionQueryComposer
from cloud_dictionary.definitions.entities.definition import Definition
from cloud_dictionary.definitions.repositories.definition_repository import DefinitionRepository
from cloud_dictionary.logging.logger import log
from cloud_dictionary.utils.sampling import SamplingSource


class RandomDefinitionSelector:
    """
    Picks a definition uniformly at random by skipping a random number of definitions.

    The range of the draw comes from the mirrored count, so the selection is only as uniform as
    the mirror is accurate. Skipping is linear in the offset on the server side.
    """

    def __init__(
        self,
        definition_repository: DefinitionRepository,
        counter_maintainer: CounterMaintainer,
        query_composer: DefinitionQueryComposer,
        sampling_source: SamplingSource,
    ):
        self._definitions = definition_repository
        self._counter = counter_maintainer
        self._queries = query_composer
        self._sampling_source = sampling_source

    async def get_random_definition(self) -> Definition | None:
        count = await self._counter.get_count()
        if count <= 0:
            return None

        index = self._sampling_source.randrange(count)
        definition = await self._definitions.find_first(self._queries.at_offset(index))
        if definition is None:
            log.warning(
                f"No definition at random offset {index} although the mirrored count is {count}. "
                "The counter is ahead of the definitions collection."
            )
        return definition
