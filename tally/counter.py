from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Tag, TypeAdapter

from ._action import Action


__all__ = (
    "CounterAction",
    "CounterState",
    "DecrementTotalByOne",
    "IncrementTotalByOne",
    "MultiplyByOneHundred",
    "MultiplyByTwo",
    "Reset",
    "UnrecognizedAction",

    "counter_reducer",
    "parse_action",
)


class CounterState(BaseModel):
    model_config = ConfigDict(frozen=True)

    total: int = 0


class IncrementTotalByOne(Action):
    type: Literal["incrementTotalByOne"] = "incrementTotalByOne"


class DecrementTotalByOne(Action):
    type: Literal["decrementTotalByOne"] = "decrementTotalByOne"


class MultiplyByTwo(Action):
    type: Literal["multiplyByTwo"] = "multiplyByTwo"


class MultiplyByOneHundred(Action):
    type: Literal["multiplyByOneHundred"] = "multiplyByOneHundred"


class Reset(Action):
    type: Literal["reset"] = "reset"


class UnrecognizedAction(Action):
    model_config = ConfigDict(frozen=True, extra="allow")

    type: Any = None


_UNRECOGNIZED_TAG = "@@unrecognized"

_KNOWN_TYPES = frozenset((
    "incrementTotalByOne",
    "decrementTotalByOne",
    "multiplyByTwo",
    "multiplyByOneHundred",
    "reset",
))


def _discriminate(value: Any) -> str:
    if isinstance(value, Mapping):
        action_type = value.get("type")
    else:
        action_type = getattr(value, "type", None)

    if isinstance(action_type, str) and action_type in _KNOWN_TYPES:
        return action_type

    return _UNRECOGNIZED_TAG


CounterAction = Annotated[
    Union[
        Annotated[IncrementTotalByOne, Tag("incrementTotalByOne")],
        Annotated[DecrementTotalByOne, Tag("decrementTotalByOne")],
        Annotated[MultiplyByTwo, Tag("multiplyByTwo")],
        Annotated[MultiplyByOneHundred, Tag("multiplyByOneHundred")],
        Annotated[Reset, Tag("reset")],
        Annotated[UnrecognizedAction, Tag(_UNRECOGNIZED_TAG)],
    ],
    Discriminator(_discriminate)
]


_action_adapter: TypeAdapter[CounterAction] = TypeAdapter(CounterAction)


def parse_action(data: Union[Mapping[str, Any], str, bytes]) -> CounterAction:
    if isinstance(data, (str, bytes)):
        return _action_adapter.validate_json(data)

    return _action_adapter.validate_python(data)


def counter_reducer(
    state: Optional[CounterState],
    action: CounterAction
) -> CounterState:
    if state is None:
        state = CounterState()

    action_type = _discriminate(action)

    if action_type == "incrementTotalByOne":
        return CounterState(total=state.total + 1)

    if action_type == "decrementTotalByOne":
        return CounterState(total=state.total - 1)

    if action_type == "multiplyByTwo":
        return CounterState(total=state.total * 2)

    if action_type == "multiplyByOneHundred":
        return CounterState(total=state.total * 100)

    if action_type == "reset":
        return CounterState(total=0)

    return state
