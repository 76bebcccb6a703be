import inspect
import logging
import types

from inspect import signature
from typing import (
    Annotated,
    Any,
    Callable,
    Literal,
    Optional,
    TypeVar,
    Union,
    get_args,
    get_origin,
    get_type_hints
)

from pydantic import BaseModel, TypeAdapter
from pydantic.errors import PydanticSchemaGenerationError


__all__ = (
    "Reducer",
)


A = TypeVar("A")
S = TypeVar("S")


logger = logging.getLogger(__name__)


Reducer = Callable[[Optional[S], A], S]


def _strip_optional(hint: Any) -> Any:
    if get_origin(hint) not in (Union, types.UnionType):
        return hint

    args = tuple(arg for arg in get_args(hint) if arg is not type(None))

    if len(args) == 1:
        return args[0]

    return Union[args]


def _get_reducer_types(reducer: Reducer) -> tuple[Any, Any]:
    target = reducer if inspect.isroutine(reducer) else type(reducer).__call__

    try:
        parameters = list(signature(reducer).parameters)
        hints = get_type_hints(target, include_extras=True)
    except (NameError, TypeError, ValueError):
        return None, None

    if len(parameters) < 2:
        return None, None

    state_type = hints.get(parameters[0])
    action_type = hints.get(parameters[1])

    if state_type is not None:
        state_type = _strip_optional(state_type)

    return state_type, action_type


def _get_action_adapter(action_type: Any) -> Optional[TypeAdapter]:
    if action_type is None or action_type is Any:
        return None

    try:
        return TypeAdapter(action_type)
    except PydanticSchemaGenerationError:
        logger.debug("No action adapter for %r", action_type)

        return None


def _get_known_action_types(action_type: Any) -> Optional[frozenset]:
    origin = get_origin(action_type)

    if origin is Annotated:
        return _get_known_action_types(get_args(action_type)[0])

    if origin in (Union, types.UnionType):
        known: set = set()

        for arg in get_args(action_type):
            arg_types = _get_known_action_types(arg)

            if arg_types is None:
                return None

            known |= arg_types

        return frozenset(known)

    if isinstance(action_type, type) and issubclass(action_type, BaseModel):
        field = action_type.model_fields.get("type")

        if field is not None and get_origin(field.annotation) is Literal:
            return frozenset(get_args(field.annotation))

    return None
