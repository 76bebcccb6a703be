from types import SimpleNamespace

import pytest

from pydantic import ValidationError

from tally import Action, InitAction, create_store
from tally.counter import (
    CounterState,
    DecrementTotalByOne,
    IncrementTotalByOne,
    MultiplyByOneHundred,
    MultiplyByTwo,
    Reset,
    UnrecognizedAction,
    counter_reducer,
    parse_action
)


@pytest.mark.parametrize(
    "action, before, after",
    [
        (IncrementTotalByOne(), 0, 1),
        (DecrementTotalByOne(), 1, 0),
        (MultiplyByTwo(), 5, 10),
        (MultiplyByOneHundred(), 2, 200),
        (Reset(), 42, 0),
        (Reset(), -3, 0),
    ]
)
def test_dispatch_transitions(action, before, after):
    store = create_store(counter_reducer, CounterState(total=before))

    store.dispatch(action)

    assert store.get_state() == CounterState(total=after)


def test_reducer_defaults_missing_state():
    assert counter_reducer(None, InitAction()) == CounterState(total=0)


def test_reducer_returns_same_state_for_unrecognized_actions():
    state = CounterState(total=9)

    assert counter_reducer(state, UnrecognizedAction(type="nope")) is state
    assert counter_reducer(state, InitAction()) is state
    assert counter_reducer(state, object()) is state


def test_reducer_does_not_mutate_state():
    state = CounterState(total=4)

    counter_reducer(state, MultiplyByTwo())

    assert state.total == 4


def test_state_is_frozen():
    state = CounterState(total=1)

    with pytest.raises(ValidationError):
        state.total = 2


def test_total_is_unbounded():
    state = CounterState(total=10 ** 30)

    assert counter_reducer(state, MultiplyByOneHundred()).total == 10 ** 32


@pytest.mark.parametrize(
    "data, expected",
    [
        ({"type": "incrementTotalByOne"}, IncrementTotalByOne),
        ({"type": "decrementTotalByOne"}, DecrementTotalByOne),
        ({"type": "multiplyByTwo"}, MultiplyByTwo),
        ({"type": "multiplyByOneHundred"}, MultiplyByOneHundred),
        ({"type": "reset"}, Reset),
        ({"type": "thisWillNotDoAnything"}, UnrecognizedAction),
        ({}, UnrecognizedAction),
        ({"type": 5}, UnrecognizedAction),
    ]
)
def test_parse_action(data, expected):
    assert type(parse_action(data)) is expected


def test_parse_action_from_json():
    assert isinstance(parse_action('{"type": "reset"}'), Reset)


def test_unrecognized_action_keeps_payload():
    action = parse_action({"type": "addTen", "amount": 10})

    assert isinstance(action, UnrecognizedAction)
    assert action.type == "addTen"
    assert action.model_extra == {"amount": 10}


def test_same_sequence_is_deterministic():
    sequence = [
        {"type": "incrementTotalByOne"},
        {"type": "multiplyByOneHundred"},
        {"type": "decrementTotalByOne"},
        {"type": "somethingElse"},
        {"type": "multiplyByTwo"},
    ]

    def run() -> CounterState:
        store = create_store(counter_reducer, CounterState(total=3))

        for action in sequence:
            store.dispatch(action)

        return store.get_state()

    assert run() == run() == CounterState(total=798)


def test_practice_sequence_end_to_end():
    store = create_store(counter_reducer)
    totals = []
    calls = []

    store.subscribe(lambda: totals.append(store.get_state().total))
    store.subscribe(lambda: calls.append(None))

    for action in (
        DecrementTotalByOne(),
        MultiplyByTwo(),
        MultiplyByOneHundred(),
        Reset(),
    ):
        store.dispatch(action)

    assert totals == [-1, -2, -200, 0]
    assert store.get_state() == CounterState(total=0)
    assert len(calls) == 4


def test_useless_action_notifies_every_subscriber_once(store):
    counts = [0, 0]

    def first() -> None:
        counts[0] += 1

    def second() -> None:
        counts[1] += 1

    store.dispatch(IncrementTotalByOne())
    store.subscribe(first)
    store.subscribe(second)

    store.dispatch({"type": "thisWillNotDoAnything"})

    assert store.get_state().total == 1
    assert counts == [1, 1]


@pytest.mark.parametrize(
    "action",
    [
        MultiplyByTwo(),
        Action(type="multiplyByTwo"),
        {"type": "multiplyByTwo"},
        SimpleNamespace(type="multiplyByTwo"),
    ]
)
def test_reducer_keys_on_action_type(action):
    assert counter_reducer(CounterState(total=6), action).total == 12
