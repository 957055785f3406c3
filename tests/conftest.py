"""Pytest configuration."""
import os
from typing import Generator

import pytest


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: mark test as an integration test that talks to the live Stream API",
    )
    config.addinivalue_line(
        "markers",
        "unit: mark test as a unit test that can run in isolation",
    )


@pytest.fixture(scope="function", autouse=True)
def clean_env(request) -> Generator[None, None, None]:
    """Clean Stream environment variables before and after each unit test."""
    if request.node.get_closest_marker("integration"):
        yield
        return

    original_env = dict(os.environ)

    for var in [
        "STREAM_API_KEY",
        "STREAM_API_SECRET",
        "STREAM_TIMEOUT",
        "STREAM_MAX_REDIRECTS",
    ]:
        os.environ.pop(var, None)

    yield

    os.environ.clear()
    os.environ.update(original_env)


def pytest_collection_modifyitems(config, items):
    """Handle test markers and skip logic."""
    run_integration = config.getoption("--integration", default=False)

    for item in items:
        if "integration" in item.nodeid:
            item.add_marker(pytest.mark.integration)

        if "integration" in item.keywords and not run_integration:
            item.add_marker(pytest.mark.skip(reason="need --integration option to run"))


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--integration",
        action="store_true",
        default=False,
        help="run integration tests",
    )
