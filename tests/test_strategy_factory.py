import pytest

from design_patterns.factory import get_observer
from design_patterns.state_observers import ConcreteObserverA, ConcreteObserverB
from design_patterns.strategy import RandomStateStrategy, SequenceStateStrategy


def test_random_strategy_stays_in_bounds_and_covers_range():
    strategy = RandomStateStrategy(seed=1)
    draws = {strategy.next_state() for _ in range(500)}
    assert draws == set(range(0, 11))


def test_random_strategy_is_reproducible_with_seed():
    first = RandomStateStrategy(seed=42)
    second = RandomStateStrategy(seed=42)
    assert [first.next_state() for _ in range(20)] == [
        second.next_state() for _ in range(20)
    ]


def test_random_strategy_returns_plain_int():
    assert type(RandomStateStrategy(seed=0).next_state()) is int


def test_random_strategy_rejects_inverted_range():
    with pytest.raises(ValueError):
        RandomStateStrategy(low=5, high=4)


def test_sequence_strategy_cycles():
    strategy = SequenceStateStrategy([3, 9])
    assert [strategy.next_state() for _ in range(5)] == [3, 9, 3, 9, 3]


def test_sequence_strategy_requires_values():
    with pytest.raises(ValueError):
        SequenceStateStrategy([])


def test_factory_builds_observers():
    assert isinstance(get_observer("a"), ConcreteObserverA)
    assert isinstance(get_observer("B"), ConcreteObserverB)
    assert get_observer("a") is not get_observer("a")


def test_factory_rejects_unknown_kind():
    with pytest.raises(ValueError, match="Unknown observer kind"):
        get_observer("c")
