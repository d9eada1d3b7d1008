import logging

from design_patterns.state_subject import StateSource

logger = logging.getLogger(__name__)

REACTION_THRESHOLD = 7


class ConcreteObserverA:
    """
    Reacts while the subject's state is below the threshold.
    """

    def __init__(self, threshold: int = REACTION_THRESHOLD):
        self.threshold = threshold

    def update(self, subject: StateSource) -> bool:
        if subject.state < self.threshold:
            logger.info(
                f"ConcreteObserverA: Reacted to the event. New value: {subject.state}"
            )
            return True
        return False


class ConcreteObserverB:
    """
    Reacts once the subject's state reaches the threshold.
    """

    def __init__(self, threshold: int = REACTION_THRESHOLD):
        self.threshold = threshold

    def update(self, subject: StateSource) -> bool:
        if subject.state >= self.threshold:
            logger.info(
                f"ConcreteObserverB: Reacted to the event. New value: {subject.state}"
            )
            return True
        return False
