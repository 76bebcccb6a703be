from __future__ import annotations

import logging

from collections.abc import Mapping
from threading import RLock
from typing import Any, Callable, Generic, Optional, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from ._action import InitAction
from ._errors import InvalidActionError, ReentrantDispatchError
from ._reducer import (
    Reducer,
    _get_action_adapter,
    _get_known_action_types,
    _get_reducer_types
)


__all__ = (
    "Store",
    "Subscriber",
    "Unsubscribe",

    "create_store",
)


A = TypeVar("A")
S = TypeVar("S")


logger = logging.getLogger(__name__)


Subscriber = Callable[[], None]
Unsubscribe = Callable[[], None]


class Store(Generic[S, A]):
    state_type: Any
    action_type: Any

    def dispatch(self, action: A) -> A:
        raise NotImplementedError

    def get_state(self) -> S:
        raise NotImplementedError

    def subscribe(self, subscriber: Subscriber) -> Unsubscribe:
        raise NotImplementedError


def _action_type(action: Any) -> Optional[str]:
    if isinstance(action, Mapping):
        return action.get("type")

    return getattr(action, "type", None)


def _action_data(action: Any) -> Optional[Mapping]:
    if isinstance(action, Mapping):
        return action

    if isinstance(action, BaseModel):
        return action.model_dump()

    if hasattr(action, "type"):
        return {"type": action.type}

    return None


class _Subscription:
    __slots__ = ("subscriber",)

    def __init__(self, subscriber: Subscriber) -> None:
        self.subscriber = subscriber


class _DefaultStore(Store[S, A]):
    _reducer: Reducer
    _action_adapter: Optional[TypeAdapter]
    _known_action_types: Optional[frozenset]

    _state: S

    _subscriptions: list[_Subscription]

    _lock: RLock
    _dispatching: bool

    def __init__(
        self,
        state_type: Any,
        action_type: Any,
        reducer: Reducer,
        action_adapter: Optional[TypeAdapter]
    ) -> None:
        self.state_type = state_type
        self.action_type = action_type

        self._reducer = reducer
        self._action_adapter = action_adapter
        self._known_action_types = _get_known_action_types(action_type)

        self._subscriptions = []

        self._lock = RLock()
        self._dispatching = False

    def _initialize(self, initial_state: Optional[S]) -> None:
        if initial_state is not None:
            self._state = initial_state

            return

        self._state = self._reducer(None, self._init_action())

    def _init_action(self) -> Any:
        action = InitAction()

        if self._action_adapter is None:
            return action

        try:
            return self._action_adapter.validate_python(action.model_dump())
        except ValidationError:
            return action

    def _coerce(self, action: Any) -> Any:
        if self._action_adapter is None:
            return action

        data = _action_data(action)

        if data is None:
            return action

        try:
            return self._action_adapter.validate_python(data)
        except ValidationError as error:
            action_type = _action_type(data)

            if self._known_action_types is not None and (
                not isinstance(action_type, str)
                or action_type not in self._known_action_types
            ):
                logger.debug("Unrecognized action type %r", action_type)

                return action

            raise InvalidActionError(
                f"Action {dict(data)!r} is not a valid {self.action_type!r}"
            ) from error

    def _notify(self) -> None:
        subscriptions = tuple(self._subscriptions)

        logger.debug("Notifying %d subscriber(s)", len(subscriptions))

        for subscription in subscriptions:
            subscription.subscriber()

    def dispatch(self, action: A) -> A:
        with self._lock:
            if self._dispatching:
                raise ReentrantDispatchError(
                    "Reducers and subscribers may not dispatch actions"
                )

            self._dispatching = True

            try:
                reduced_action = self._coerce(action)

                logger.debug("Dispatching %s", _action_type(reduced_action))

                previous_state = self._state
                next_state = self._reducer(previous_state, reduced_action)

                if next_state is not previous_state:
                    self._state = next_state

                    logger.debug("State replaced: %r", next_state)
                else:
                    logger.debug("State unchanged")

                self._notify()
            finally:
                self._dispatching = False

        return action

    def get_state(self) -> S:
        return self._state

    def subscribe(self, subscriber: Subscriber) -> Unsubscribe:
        if not callable(subscriber):
            raise TypeError("Subscriber must be callable")

        subscription = _Subscription(subscriber)

        with self._lock:
            self._subscriptions.append(subscription)

        def unsubscribe() -> None:
            with self._lock:
                for index, candidate in enumerate(self._subscriptions):
                    if candidate is subscription:
                        del self._subscriptions[index]

                        return

        return unsubscribe


def create_store(
    reducer: Reducer,
    initial_state: Optional[S] = None
) -> Store[S, A]:
    if not callable(reducer):
        raise TypeError("Reducer must be callable")

    state_type, action_type = _get_reducer_types(reducer)

    store: _DefaultStore[S, A] = _DefaultStore(
        state_type,
        action_type,
        reducer,
        _get_action_adapter(action_type)
    )

    store._initialize(initial_state)

    logger.debug("Store created with state %r", store.get_state())

    return store
