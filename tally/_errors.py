__all__ = (
    "InvalidActionError",
    "ReentrantDispatchError",
    "StoreError",
)


class StoreError(Exception):
    pass


class ReentrantDispatchError(StoreError):
    pass


class InvalidActionError(StoreError):
    pass
