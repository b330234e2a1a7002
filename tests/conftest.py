"""Shared pytest configuration for the Workshop test suite."""

import pytest


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast, isolated unit tests")
    config.addinivalue_line("markers", "integration: end-to-end tests through the CLI")


@pytest.fixture
def recipe_file(tmp_path):
    """Write a two-order recipe and return its path."""
    path = tmp_path / "recipe.yaml"
    path.write_text(
        "orders:\n"
        "    - store: chair\n"
        "      material: wood\n"
        "    - store: table\n"
        "      material: plastic\n"
        "telemetry:\n"
        "    log_level: WARNING\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def workshop_caplog(caplog):
    """caplog that also sees the Workshop logger, which does not propagate by default."""
    import logging

    from workshop.core.paths import LOGGER_NAME

    log = logging.getLogger(LOGGER_NAME)
    previous = log.propagate
    log.propagate = True
    try:
        with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
            yield caplog
    finally:
        log.propagate = previous


@pytest.fixture(autouse=True)
def _reset_workshop_logger():
    """Rebind the Workshop logger to the current stdout after each test."""
    yield
    from workshop.core.logger import Logger
    from workshop.core.paths import LOGGER_NAME

    Logger.setup(name=LOGGER_NAME)
