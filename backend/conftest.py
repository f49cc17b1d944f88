"""Root conftest: load test environment variables, route structlog through stdlib, and share game fixtures."""

import random
from pathlib import Path

import pytest
import structlog
from dotenv import load_dotenv

from fastwriting.logic.content import ContentBank
from fastwriting.logic.scheduler import VirtualScheduler
from fastwriting.tests.helpers.game import SINGLE_ENTRY_CONTENT, EventRecorder, SteppingClock

load_dotenv(Path(__file__).resolve().parent.parent / ".env.tests")

# Route structlog through stdlib logging so caplog works in tests.
structlog.configure(
    processors=[
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ],
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
    cache_logger_on_first_use=False,
)


@pytest.fixture(autouse=True)
def _clear_log_context():
    """Prevent context leaking between tests."""
    structlog.contextvars.clear_contextvars()
    yield
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def scheduler():
    return VirtualScheduler()


@pytest.fixture
def recorder():
    return EventRecorder()


@pytest.fixture
def single_entry_content():
    return ContentBank(SINGLE_ENTRY_CONTENT)


@pytest.fixture
def seeded_content():
    return ContentBank(rng=random.Random(42))


@pytest.fixture
def wall_clock():
    return SteppingClock()
