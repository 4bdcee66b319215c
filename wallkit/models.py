"""Props models for WallKit components."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from wallkit.kernel.types import DEFAULT_FALLBACK_LABEL, SORT_RANDOM


class TagCloudProps(BaseModel):
    """What a TagCloud is constructed with. Immutable once built."""

    model_config = {"extra": "forbid", "frozen": True}

    entries: list[tuple[Any, Any]] = Field(default_factory=list)
    # Unknown strategies are reported at render time
    sort_by: str = SORT_RANDOM
    auto_size: bool = True
    fallback_label: str = DEFAULT_FALLBACK_LABEL

    @field_validator("sort_by", mode="before")
    @classmethod
    def _stringify_sort_by(cls, value: Any) -> str:
        return value if isinstance(value, str) else str(value)
