"""Configuration utilities for INTERACTOR.

Centralizes environment-driven defaults used by the command-line tool. The
library itself reads no configuration.
"""

import os
from pathlib import Path

from platformdirs import user_log_dir

APP_NAME = "interactor"

LOG_PATH_ENV = "INTERACTOR_LOG_PATH"  # pragma: no mutate
FLIGHT_RECORDER_CAPACITY_ENV = "INTERACTOR_FLIGHT_RECORDER_CAPACITY"  # pragma: no mutate

DEFAULT_FLIGHT_RECORDER_CAPACITY = 2000


class InvalidSettingError(ValueError):
    """Raised when an environment setting has an unusable value."""

    def __init__(self, name: str, value: str, reason: str) -> None:
        super().__init__(f"Invalid value {value!r} for {name}: {reason}")
        self.name = name
        self.value = value


def get_log_path() -> Path:
    """Return the flight-recorder log path.

    Uses `INTERACTOR_LOG_PATH` when set, otherwise ``latest.log`` in the
    platform's user log directory (created if missing).
    """
    if path := os.environ.get(LOG_PATH_ENV):
        return Path(path)
    return Path(user_log_dir(APP_NAME, appauthor=False, ensure_exists=True)) / "latest.log"


def get_flight_recorder_capacity() -> int:
    """Return the flight-recorder buffer capacity.

    Raises:
        InvalidSettingError: If `INTERACTOR_FLIGHT_RECORDER_CAPACITY` is not a
            positive integer.
    """
    if not (raw := os.environ.get(FLIGHT_RECORDER_CAPACITY_ENV)):
        return DEFAULT_FLIGHT_RECORDER_CAPACITY
    try:
        capacity = int(raw)
    except ValueError as e:
        raise InvalidSettingError(
            FLIGHT_RECORDER_CAPACITY_ENV, raw, "expected an integer"
        ) from e
    if capacity <= 0:
        raise InvalidSettingError(FLIGHT_RECORDER_CAPACITY_ENV, raw, "must be positive")
    return capacity
