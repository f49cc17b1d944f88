import pytest

from fastwriting.logic.scheduler import VirtualScheduler
from fastwriting.session.manager import SessionManager
from fastwriting.tests.mocks.connection import MockConnection


@pytest.fixture
def manager(single_entry_content):
    return SessionManager(content=single_entry_content, scheduler_factory=VirtualScheduler)


@pytest.fixture
def connection():
    return MockConnection()
