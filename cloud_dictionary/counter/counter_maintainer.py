from cloud_dictionary.counter.entities.counter import Counter
from cloud_dictionary.counter.exceptions import CounterConflictError, CounterMissingError
from cloud_dictionary.counter.repositories.counter_repository import CounterRepository
from cloud_dictionary.definitions.repositories.definition_repository import DefinitionRepository
from cloud_dictionary.logging.logger import log
from cloud_dictionary.persistence.exceptions import EntityNotFoundError


class CounterMaintainer:
    """
    Maintains the mirrored count of definitions held in the singleton counter document.

    The mirror is best effort. Counter writes are not coordinated with the definition writes
    that trigger them, so a failure between the two leaves the count out of sync until
    the next reconciliation. Each counter write is a conditional replace on the count that was
    read, so concurrent increments and decrements cannot overwrite one another.
    """

    def __init__(
        self,
        counter_repository: CounterRepository,
        definition_repository: DefinitionRepository,
        max_attempts: int = 3,
    ):
        if max_attempts < 1:
            raise ValueError("The counter needs at least one write attempt.")

        self._counters = counter_repository
        self._definitions = definition_repository
        self._max_attempts = max_attempts

    async def get_count(self) -> int:
        """
        Get the mirrored definition count.

        :raises EntityNotFoundError: If the counter document does not exist.
        """
        counter = await self._counters.get_counter()
        if counter is None:
            raise EntityNotFoundError(f"Counter document not found in '{self._counters.collection_name}'.")
        return counter.count

    async def increment(self) -> int:
        """
        Add one to the mirrored count.

        :return: The new count.
        :raises CounterMissingError: If the counter document does not exist.
        """
        return await self._adjust(1)

    async def decrement(self) -> int:
        """
        Subtract one from the mirrored count, never going below zero.

        :return: The new count.
        :raises CounterMissingError: If the counter document does not exist.
        """
        return await self._adjust(-1)

    async def reconcile(self) -> tuple[int | None, int]:
        """
        Recompute the count from the definitions collection and overwrite the mirror with it.
        Creates the counter document if it is missing.

        :return: The previous mirrored count (None if the counter was missing) and the actual count.
        """
        counter = await self._counters.get_counter()
        previous = counter.count if counter else None

        actual = await self._definitions.count()
        await self._counters.upsert_counter(Counter(count=actual))

        if previous is None:
            log.info(f"Provisioned the definition counter with a count of {actual}.")
        elif previous != actual:
            log.warning(f"Definition counter drifted: mirrored {previous}, actual {actual}. Corrected.")

        return previous, actual

    async def _adjust(self, delta: int) -> int:
        for attempt in range(1, self._max_attempts + 1):
            counter = await self._counters.get_counter()
            if counter is None:
                raise CounterMissingError(
                    f"Counter document not found in '{self._counters.collection_name}'. "
                    "The counter has to be provisioned before definitions are added or deleted."
                )

            new_count = counter.count + delta
            if new_count < 0:
                log.warning(
                    f"Definition counter would drop to {new_count}; clamping it at 0. "
                    "The mirrored count has drifted from the definitions collection."
                )
                new_count = 0
            if new_count == counter.count:
                return new_count

            try:
                await self._counters.replace_counter(Counter(id=counter.id, count=new_count), counter.count)
                return new_count
            except EntityNotFoundError:
                log.debug(f"Counter changed concurrently (attempt {attempt}/{self._max_attempts}).")

        raise CounterConflictError(
            f"Could not update the definition counter after {self._max_attempts} concurrent modifications."
        )
