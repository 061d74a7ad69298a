import io
import re

import pytest

from game_state_machine.event_logger import EventLogger
from game_state_machine.state_machine import StateMachine

TIMESTAMP = re.compile(r"^\[\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\] ")


def messages(stream):
    """Event lines with their timestamp prefix removed."""
    return [TIMESTAMP.sub("", line) for line in stream.getvalue().splitlines() if TIMESTAMP.match(line)]


@pytest.fixture
def stream():
    return io.StringIO()


@pytest.fixture
def event_logger(stream):
    return EventLogger(stream=stream)


@pytest.fixture
def sleeps():
    return []


@pytest.fixture
def machine(event_logger, sleeps, stream):
    machine = StateMachine(event_logger, update_duration=1.0, sleep=sleeps.append)
    stream.seek(0)
    stream.truncate()
    return machine
