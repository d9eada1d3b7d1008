import sys
from typing import Optional

import yaml

from design_patterns.factory import get_observer
from design_patterns.observer import Observer
from design_patterns.state_subject import StateSubject
from design_patterns.strategy import (
    RandomStateStrategy,
    SequenceStateStrategy,
    StateStrategy,
)
from utils.logger import get_logger


def load_config(config_path: str) -> dict:
    """
    Loads a YAML configuration file and returns the configuration as a dictionary.
    An empty file yields an empty dictionary.

    Parameters:
        config_path (str): The file path to the YAML configuration file.

    Returns:
        dict: The configuration dictionary.
    """
    with open(config_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def build_strategy(config: dict) -> StateStrategy:
    """
    Builds the state strategy from the 'state' section of the configuration.
    A 'sequence' list takes precedence over the random draw.
    """
    state_config = config.get("state") or {}
    if sequence := state_config.get("sequence"):
        return SequenceStateStrategy(sequence)
    return RandomStateStrategy(seed=state_config.get("seed"))


def run_demo(config: dict, logger) -> StateSubject:
    """
    Runs the client scenario: subscribe the configured observers, change the state a few
    times, unsubscribe one observer and change the state again.

    Parameters:
        config (dict): The configuration dictionary.
        logger: A logger instance for narration messages.

    Returns:
        StateSubject: The subject at the end of the run.
    """
    logger.info("-- Create subject instance")
    subject = StateSubject(
        strategy=build_strategy(config),
        fail_fast=(config.get("notify") or {}).get("fail_fast", True),
    )

    observers: dict[str, Observer] = {}
    for kind in config.get("observers") or ["a", "b"]:
        logger.info(f"-- Create observer {kind.upper()}")
        observer = observers.setdefault(kind.lower(), get_observer(kind))
        subject.subscribe(observer)

    logger.info("-- Do some logic")
    for _ in range(config.get("rounds_before_unsubscribe", 2)):
        subject.some_business_logic()

    if removed_kind := config.get("unsubscribe", "b"):
        logger.info(f"-- Unsubscribe observer {removed_kind.upper()}")
        subject.unsubscribe(
            observers.get(removed_kind.lower()) or get_observer(removed_kind)
        )

    for _ in range(config.get("rounds_after_unsubscribe", 1)):
        subject.some_business_logic()
    return subject


def main(argv: Optional[list[str]] = None) -> int:
    """
    Loads the configuration, sets up logging and runs the demonstration.

    Parameters:
        argv (list, optional): Command-line arguments; the first one, if any, is the config path.

    Returns:
        int: The process exit code.
    """
    args = sys.argv[1:] if argv is None else argv
    config = load_config(args[0] if args else "config.yml")
    logger_config = config.get("logger") or {}
    logger = get_logger(
        "design_patterns",
        console_level=logger_config.get("console_level", "INFO"),
        file_level=logger_config.get("file_level", "DEBUG"),
        logs_dir=logger_config.get("logs_dir", "logs"),
    )
    run_demo(config, logger)
    return 0


if __name__ == "__main__":
    sys.exit(main())
