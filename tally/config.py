from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


__all__ = (
    "SCRIPTS",
    "Script",
    "WalkthroughConfig",
)


Script = Literal["practice", "full"]


SCRIPTS: dict[str, tuple[str, ...]] = {
    "practice": (
        "decrementTotalByOne",
        "multiplyByTwo",
        "multiplyByOneHundred",
        "reset",
    ),
    "full": (
        "incrementTotalByOne",
        "incrementTotalByOne",
        "thisWillNotDoAnything",
        "decrementTotalByOne",
        "multiplyByTwo",
        "multiplyByOneHundred",
        "reset",
    ),
}


class WalkthroughConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    script: Script = "practice"
    initial_total: Optional[int] = None
    actions: tuple[str, ...] = Field(default_factory=tuple)
    log_level: str = "INFO"
    json_output: bool = False

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        value = value.upper()

        if value not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level {value!r}")

        return value

    def action_types(self) -> tuple[str, ...]:
        return self.actions or SCRIPTS[self.script]
