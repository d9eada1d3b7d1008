import logging
import threading
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class Observer(Protocol):
    """
    Protocol for observers.

    :return: None.
    """

    def update(self, subject: Any) -> Any: ...


class NotificationError(Exception):
    """
    Raised by a best-effort notify after every observer has been called,
    when at least one of them failed.
    """

    def __init__(self, failures: list[tuple[Observer, Exception]]):
        self.failures = failures
        names = ", ".join(type(observer).__name__ for observer, _ in failures)
        super().__init__(f"{len(failures)} observer(s) failed: {names}")


class Subject:
    """
    Subject class implementing the Observer design pattern.

    Observers are kept in subscription order and compared by identity, so the
    same instance can never be subscribed twice.

    :param fail_fast: If True, the first exception raised by an observer stops
        the notification and propagates. If False, every observer is called and
        the failures are raised together as a NotificationError.
    """

    def __init__(self, fail_fast: bool = True):
        self._observers: list[Observer] = []
        self._lock = threading.RLock()
        self.fail_fast = fail_fast

    @property
    def observers(self) -> tuple:
        with self._lock:
            return tuple(self._observers)

    def __len__(self) -> int:
        with self._lock:
            return len(self._observers)

    def __contains__(self, observer: object) -> bool:
        return self._index_of(observer) != -1

    def _index_of(self, observer: object) -> int:
        with self._lock:
            for i, subscribed in enumerate(self._observers):
                if subscribed is observer:
                    return i
        return -1

    def subscribe(self, observer: Observer) -> bool:
        """
        Attaches an observer to the subject.

        :param observer: The observer to add.
        :return: True if the observer was added, False if it was already subscribed.
        """
        with self._lock:
            if observer in self:
                logger.warning("Subject: Observer has been Subscribed already.")
                return False
            logger.info("Subject: Subscribed an observer.")
            self._observers.append(observer)
            return True

    def unsubscribe(self, observer: Observer) -> bool:
        """
        Detaches an observer from the subject.

        :param observer: The observer to remove.
        :return: True if the observer was removed, False if it was not subscribed.
        """
        with self._lock:
            index = self._index_of(observer)
            if index == -1:
                logger.warning("Subject: Nonexistent observer.")
                return False
            del self._observers[index]
            logger.info("Subject: Unsubscribed an observer.")
            return True

    def notify(self) -> None:
        """
        Triggers an update in each subscriber, in subscription order.

        Subscriptions changed by an observer during the pass apply to the next notify.
        """
        with self._lock:
            logger.info("Subject: Notifying observers...")
            failures: list[tuple[Observer, Exception]] = []
            for observer in tuple(self._observers):
                if self.fail_fast:
                    observer.update(self)
                    continue
                try:
                    observer.update(self)
                except Exception as e:
                    logger.exception(
                        f"Subject: Observer {type(observer).__name__} failed: {e}"
                    )
                    failures.append((observer, e))
            if failures:
                raise NotificationError(failures)
