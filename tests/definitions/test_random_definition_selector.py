import pytest

from cloud_dictionary.counter.entities.counter import Counter
from cloud_dictionary.definitions.definition_query_composer import DefinitionQueryComposer
from cloud_dictionary.definitions.random_definition_selector import RandomDefinitionSelector
from cloud_dictionary.utils.sampling import RandomSamplingSource
from tests.fixtures import *


class TestRandomDefinitionSelector:
    @pytest.fixture
    def selector(self, definition_repository, counter_maintainer, sampling_source):
        return RandomDefinitionSelector(
            definition_repository, counter_maintainer, DefinitionQueryComposer(), sampling_source
        )

    @pytest.fixture
    async def three_definitions(self, definition_repository, counter_repository):
        for definition_id, word in [("a1", "ephemeral"), ("a2", "serendipity"), ("a3", "petrichor")]:
            await definition_repository.create_definition(make_definition(definition_id, word))
        await counter_repository.upsert_counter(Counter(count=3))

    @pytest.mark.asyncio
    async def test_zero_count_returns_none_without_drawing(self, selector, counter_repository, sampling_source):
        await counter_repository.upsert_counter(Counter(count=0))

        assert await selector.get_random_definition() is None
        assert sampling_source.requested_stops == []

    @pytest.mark.asyncio
    async def test_negative_count_returns_none(self, selector, counter_repository, sampling_source):
        await counter_repository.upsert_counter(Counter(count=-2))

        assert await selector.get_random_definition() is None
        assert sampling_source.requested_stops == []

    @pytest.mark.asyncio
    async def test_picks_definition_at_drawn_offset(self, selector, three_definitions, sampling_source):
        sampling_source.values = [0, 2, 1]

        picked = [(await selector.get_random_definition()).id for _ in range(3)]

        assert picked == ["a1", "a3", "a2"]
        assert sampling_source.requested_stops == [3, 3, 3]

    @pytest.mark.asyncio
    async def test_stale_high_count_returns_none(
        self, selector, three_definitions, counter_repository, sampling_source, caplog
    ):
        await counter_repository.upsert_counter(Counter(count=5))
        sampling_source.values = [4]

        assert await selector.get_random_definition() is None
        assert "ahead of the definitions collection" in caplog.text

    @pytest.mark.asyncio
    async def test_with_random_sampling_source(
        self, definition_repository, counter_maintainer, three_definitions
    ):
        selector = RandomDefinitionSelector(
            definition_repository, counter_maintainer, DefinitionQueryComposer(), RandomSamplingSource(seed=7)
        )

        for _ in range(10):
            assert (await selector.get_random_definition()).id in {"a1", "a2", "a3"}


def test_random_sampling_source_is_reproducible():
    first = RandomSamplingSource(seed=42)
    second = RandomSamplingSource(seed=42)

    draws = [first.randrange(10) for _ in range(20)]
    assert draws == [second.randrange(10) for _ in range(20)]
    assert all(0 <= draw < 10 for draw in draws)
