"""Shared fixtures for the scenebeat test suite."""

import pytest
from loguru import logger

from scenebeat.core import BranchResolver, Deduplicator, HeartbeatFactory
from scenebeat.host import SignalHub, StaticHostContext

PROJECT = "Spaceship"
DATA_ROOT = "/p/Spaceship/Assets"


class FakeRunner:
    """CommandRunner that records calls instead of spawning processes."""

    def __init__(self, output="main\n", error=None):
        self.output = output
        self.error = error
        self.calls = []

    def run(self, command, args, working_dir, timeout):
        self.calls.append((command, tuple(args), working_dir, timeout))
        if self.error is not None:
            raise self.error
        return self.output


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def log_records():
    """Capture loguru records emitted during the test."""
    records = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)


@pytest.fixture
def runner():
    return FakeRunner()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def host():
    return StaticHostContext(root=DATA_ROOT, document_path="Assets/Scenes/Main.unity")


@pytest.fixture
def hub():
    return SignalHub()


@pytest.fixture
def factory(runner):
    return HeartbeatFactory(PROJECT, BranchResolver(runner=runner))


@pytest.fixture
def deduplicator(clock):
    return Deduplicator(30.0, clock=clock)


def warnings_in(records):
    return [r for r in records if r["level"].name == "WARNING"]
