from typing import Callable

from design_patterns.observer import Observer
from design_patterns.state_observers import ConcreteObserverA, ConcreteObserverB


def get_observer(observer_kind: str) -> Observer:
    """
    Returns a new observer instance based on the observer kind.

    :param observer_kind: The kind of observer ("a" or "b", case-insensitive).
    :return: The corresponding observer.
    """
    observers: dict[str, Callable[[], Observer]] = {
        "a": ConcreteObserverA,
        "b": ConcreteObserverB,
    }
    try:
        return observers[observer_kind.lower()]()
    except KeyError:
        raise ValueError(f"Unknown observer kind: {observer_kind!r}") from None
