"""Test configuration for activity-template."""

import pytest
import structlog

from activity_template.core.config import RenderConfig
from activity_template.models import GenerationRequest

CREATION_DATE = "Monday, October 19, 2026"


@pytest.fixture(autouse=True)
def reset_logging():
    """Restore default structlog configuration after each test.

    The CLI configures logging against the stream of the runner that invoked
    it; later tests must not write to that closed stream.
    """
    yield
    structlog.reset_defaults()


@pytest.fixture
def creation_date():
    """Pre-formatted creation date used in source headers.

    Returns:
        str: A fixed long-form date string.
    """
    return CREATION_DATE


@pytest.fixture
def render_config():
    """Create the default rendering configuration.

    Returns:
        RenderConfig: Configuration with the built-in defaults, independent
            of the environment.
    """
    return RenderConfig()


@pytest.fixture
def request_with_layout():
    """Create a request that generates a layout file.

    Returns:
        GenerationRequest: A launcher activity bound to activity_main.
    """
    return GenerationRequest(
        package_name="com.example.app",
        activity_name="MainActivity",
        generate_layout=True,
        is_launcher=True,
        layout_name="activity_main",
        creation_date=CREATION_DATE,
    )


@pytest.fixture
def request_without_layout():
    """Create a request without a layout file.

    Returns:
        GenerationRequest: A non-launcher Compose activity.
    """
    return GenerationRequest(
        package_name="com.example.app",
        activity_name="SettingsActivity",
        generate_layout=False,
        is_launcher=False,
        creation_date=CREATION_DATE,
    )
