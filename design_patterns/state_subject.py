import logging
import numbers
from typing import Optional, Protocol

from design_patterns.observer import Subject
from design_patterns.strategy import RandomStateStrategy, StateStrategy

logger = logging.getLogger(__name__)


class StateSource(Protocol):
    """
    Read-only view of a publisher that exposes an integer state.
    """

    @property
    def state(self) -> int: ...


class StateSubject(Subject):
    """
    The Subject owns some important state and notifies observers when the state changes.
    """

    def __init__(
        self, strategy: Optional[StateStrategy] = None, fail_fast: bool = True
    ):
        """
        Initializes the subject with state 0.

        Parameters:
            strategy (StateStrategy, optional): Supplies new states for some_business_logic.
                Defaults to a uniform draw over [0, 10].
            fail_fast (bool): Notification failure policy, see Subject.
        """
        super().__init__(fail_fast=fail_fast)
        self._state = 0
        self.strategy = strategy or RandomStateStrategy()

    @property
    def state(self) -> int:
        return self._state

    def set_state(self, value: int) -> None:
        """
        Overwrites the state with an explicit value, then notifies every observer.

        Parameters:
            value (int): The new state.
        """
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise TypeError(f"state must be an int, got {type(value).__name__}")
        with self._lock:
            self._state = int(value)
            logger.info(f"Subject: My state has just changed to: {self._state}")
            self.notify()

    def some_business_logic(self) -> int:
        """
        Changes the state using the configured strategy and notifies observers.

        Returns:
            int: The new state.
        """
        with self._lock:
            logger.info("\nSubject: I'm doing something important.")
            self.set_state(self.strategy.next_state())
            return self._state
