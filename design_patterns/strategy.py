from typing import Optional, Protocol, Sequence

import numpy as np

STATE_MIN = 0
STATE_MAX = 10


class StateStrategy(Protocol):
    """
    Protocol for state generation strategies.

    :return: The next state value.
    """

    def next_state(self) -> int: ...


class RandomStateStrategy:
    """
    Draws the next state uniformly from the inclusive range [low, high].

    :param low: Smallest value that can be drawn.
    :param high: Largest value that can be drawn.
    :param seed: Optional seed for reproducible draws.
    """

    def __init__(
        self, low: int = STATE_MIN, high: int = STATE_MAX, seed: Optional[int] = None
    ):
        if low > high:
            raise ValueError(f"low ({low}) must not exceed high ({high})")
        self.low = low
        self.high = high
        self._rng = np.random.default_rng(seed)

    def next_state(self) -> int:
        return int(self._rng.integers(self.low, self.high, endpoint=True))


class SequenceStateStrategy:
    """
    Replays a fixed sequence of states, starting over once it is exhausted.
    """

    def __init__(self, values: Sequence[int]):
        if not values:
            raise ValueError("values must contain at least one state")
        self.values = [int(v) for v in values]
        self._position = 0

    def next_state(self) -> int:
        value = self.values[self._position]
        self._position = (self._position + 1) % len(self.values)
        return value
