"""Fixtures and helpers for end-to-end tests of the ``tidykit`` CLI.

Provides a test-only `log-demo` command that emits log records at every
level, plus fixtures for a CliRunner and an isolated filesystem. Every test
under this directory is marked `e2e`.
"""

import logging
from pathlib import Path

import click
import pytest
from click.testing import CliRunner

from tidykit.entrypoints.cli import tidykit

# pylint: disable=redefined-outer-name

E2E_ROOT = Path(__file__).parent.resolve()


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config,  # pylint: disable=unused-argument
    items: list[pytest.Item],
) -> None:
    """Add default `e2e` marks to items in this directory."""
    for item in items:
        if E2E_ROOT in item.path.resolve().parents:
            item.add_marker(pytest.mark.e2e)


@click.command()
def log_demo():
    """Emit representative log messages for verbosity and recorder tests."""
    logger = logging.getLogger("tidykit.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    logger.critical("This is a critical-level test message.")
    third_party_logger = logging.getLogger("some.thirdparty")
    third_party_logger.debug("This is a debug-level third-party test message.")
    third_party_logger.info("This is an info-level third-party test message.")


def _remove_command_everywhere(group, name: str) -> None:
    """Remove a command from a Click group and any internal sections."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Register the 'log-demo' command for the duration of a test."""
    tidykit.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(tidykit, "log-demo")


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Run the test inside an isolated working directory."""
    with runner.isolated_filesystem():
        yield
