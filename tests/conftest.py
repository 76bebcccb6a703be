import pytest

from tally import create_store
from tally.counter import CounterState, counter_reducer


@pytest.fixture
def store():
    return create_store(counter_reducer, CounterState(total=0))


@pytest.fixture
def calls():
    return []
