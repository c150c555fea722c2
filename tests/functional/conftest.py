"""Default marks and CLI fixtures for tests under `tests/functional/`."""

import logging
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from click.testing import CliRunner, Result

from interactor.entrypoints.cli.main import interactor

# pylint: disable=unused-argument

FUNCTIONAL_ROOT = Path(__file__).parent.resolve()
MARKER_NAME = "functional"


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add default `functional` marks to items in `tests/functional/`."""
    for item in items:
        if FUNCTIONAL_ROOT in item.path.resolve().parents:
            if not any(marker.name == MARKER_NAME for marker in item.iter_markers()):
                item.add_marker(pytest.mark.functional)


@pytest.fixture
def run_cli(tmp_path: Path) -> Iterator[Callable[..., Result]]:
    """Invoke the ``interactor`` CLI with the flight recorder pointed at tmp_path."""
    runner = CliRunner()
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level

    def _run(*args: str, env: dict[str, str] | None = None) -> Result:
        return runner.invoke(
            interactor,
            ["--log-path", str(tmp_path / "latest.log"), *args],
            env=env,
        )

    yield _run

    # the CLI reconfigures the root logger; put the test harness back
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)
