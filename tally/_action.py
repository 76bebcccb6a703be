from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict


__all__ = (
    "INIT_ACTION_TYPE",
    "Action",
    "InitAction",
)


INIT_ACTION_TYPE = "@@tally/INIT"


class Action(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Optional[str] = None

    def get(self, key: str, default: Any = None) -> Any:
        return getattr(self, key, default)


class InitAction(Action):
    type: Literal["@@tally/INIT"] = INIT_ACTION_TYPE
