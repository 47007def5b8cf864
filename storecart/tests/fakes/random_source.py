"""Fake RandomSourcePort implementation for testing."""

from storecart.core.ports import RandomSourcePort


class ScriptedRandomSource(RandomSourcePort):
    """Random source that replays a fixed sequence of draws.

    Once the script runs out, ``default`` is returned. Every draw is
    recorded so tests can assert how many times the stock simulation ran.
    """

    def __init__(self, values: list[float] | None = None, default: float = 0.99):
        self.values = list(values or [])
        self.default = default
        self.draws: list[float] = []

    def queue(self, *values: float) -> None:
        """Append draws to the script."""
        self.values.extend(values)

    def draw(self) -> float:
        value = self.values.pop(0) if self.values else self.default
        self.draws.append(value)
        return value

    @property
    def draw_count(self) -> int:
        return len(self.draws)

    def reset(self) -> None:
        self.values.clear()
        self.draws.clear()
