from ._action import INIT_ACTION_TYPE, Action, InitAction
from ._errors import InvalidActionError, ReentrantDispatchError, StoreError
from ._reducer import Reducer
from ._store import Store, Subscriber, Unsubscribe, create_store


__all__ = (
    "INIT_ACTION_TYPE",
    "Action",
    "InitAction",
    "InvalidActionError",
    "Reducer",
    "ReentrantDispatchError",
    "Store",
    "StoreError",
    "Subscriber",
    "Unsubscribe",

    "create_store",
)
