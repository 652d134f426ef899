import random
from abc import ABC, abstractmethod


class SamplingSource(ABC):
    """Produces uniformly distributed integers."""

    @abstractmethod
    def randrange(self, stop: int) -> int:
        """Return an integer drawn uniformly from [0, stop)."""


class RandomSamplingSource(SamplingSource):
    def __init__(self, seed: int | None = None):
        self._random = random.Random(seed)

    def randrange(self, stop: int) -> int:
        return self._random.randrange(stop)
