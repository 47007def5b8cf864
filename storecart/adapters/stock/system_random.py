"""Random source backed by the standard library PRNG."""

import random

from storecart.core.ports import RandomSourcePort


class SystemRandomSource(RandomSourcePort):
    """Uniform draws from a private random.Random instance.

    Each adapter owns its generator, so seeding it never touches the
    module-level random state.
    """

    def __init__(self, seed: int | None = None):
        self.seed = seed
        self._random = random.Random(seed)

    def draw(self) -> float:
        return self._random.random()
