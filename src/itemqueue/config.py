"""Configuration utilities for ITEMQUEUE.

This module centralizes small helpers and constants related to application configuration.
"""

import logging
import os

from itemqueue.domain.errors import QueueError

SCHEDULER_ENV_VAR = "ITEMQUEUE_SCHEDULER"  # pragma: no mutate
LOG_LEVEL_ENV_VAR = "ITEMQUEUE_LOG_LEVEL"  # pragma: no mutate

SCHEDULER_KINDS = ("thread", "manual")
DEFAULT_SCHEDULER_KIND = "thread"
DEFAULT_LOG_LEVEL = "WARNING"


class UnknownSchedulerError(QueueError):
    """Raised when a scheduler kind is not one of `SCHEDULER_KINDS`."""

    def __init__(self, kind: str) -> None:
        super().__init__(
            f"Unknown scheduler kind '{kind}'; "
            f"expected one of {', '.join(SCHEDULER_KINDS)}."
        )
        self.kind = kind


class InvalidLogLevelError(QueueError):
    """Raised when ITEMQUEUE_LOG_LEVEL does not name a logging level."""

    def __init__(self, level: str) -> None:
        super().__init__(f"Invalid log level: {level}")
        self.level = level


def get_scheduler_kind() -> str:
    """Get the scheduler kind from the environment.

    Returns:
        The lower-cased value of `ITEMQUEUE_SCHEDULER`, or "thread" if unset.

    Raises:
        UnknownSchedulerError: If the value is not a known scheduler kind.
    """
    raw = os.environ.get(SCHEDULER_ENV_VAR, "")
    kind = raw.strip().lower() or DEFAULT_SCHEDULER_KIND
    if kind not in SCHEDULER_KINDS:
        raise UnknownSchedulerError(kind)
    return kind


def get_log_level() -> int:
    """Get the console log level from the environment.

    Returns:
        The numeric level named by `ITEMQUEUE_LOG_LEVEL`, or WARNING if unset.

    Raises:
        InvalidLogLevelError: If the value is not a logging level name.
    """
    name = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip() or DEFAULT_LOG_LEVEL
    if not isinstance(lvl := getattr(logging, name.upper(), None), int):
        raise InvalidLogLevelError(name)
    return lvl
