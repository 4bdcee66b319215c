"""
WallKit Kernel — Shared Types (Tag Cloud)

Data classes used across normalizer, sorter, sizer, pipeline, and renderer.
These are the contracts that bind the kernel together.

Raw input arrives as (key, value) pairs. Each pair is classified once into
one of the entry variants below; the normalizer dispatches on the variant
type and never re-inspects the raw value's shape.

Entry variants:
- UnkeyedLabel   — "PHP"                          (positional string)
- UnkeyedRecord  — {"url": "/tags/php"}           (positional record)
- UnkeyedOther   — 42                             (positional, unrecognized)
- LabelOnly      — "Archive" => None              (tag with no link)
- LabelUrl       — "PHP" => "/tags/php"
- LabelRecord    — "PHP" => {"url": ..., "weight": ...}
- LabelOther     — "PHP" => 3.5                   (keyed, unrecognized)
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Union

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

SORT_WEIGHT = "weight"
SORT_ALPHABET = "alphabet"
SORT_RANDOM = "random"

SORT_STRATEGIES: tuple[str, ...] = (SORT_WEIGHT, SORT_ALPHABET, SORT_RANDOM)

# Used when a strategy is not recognized
FALLBACK_SORT = SORT_RANDOM

# Ordered smallest → largest. Bucket count is len(SIZE_TOKENS).
SIZE_TOKENS: tuple[str, ...] = ("xs", "sm", "base", "lg", "xl")

BASE_SIZE = "base"

DEFAULT_WEIGHT = 1

DEFAULT_FALLBACK_LABEL = "Tag"

# Warning codes
UNSUPPORTED_SORT = "UNSUPPORTED_SORT"


# ---------------------------------------------------------------------------
# Raw entry variants
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class UnkeyedLabel:
    label: str


@dataclass(frozen=True)
class UnkeyedRecord:
    record: Mapping[str, Any]


@dataclass(frozen=True)
class UnkeyedOther:
    value: Any


@dataclass(frozen=True)
class LabelOnly:
    label: str


@dataclass(frozen=True)
class LabelUrl:
    label: str
    url: str


@dataclass(frozen=True)
class LabelRecord:
    label: str
    record: Mapping[str, Any]


@dataclass(frozen=True)
class LabelOther:
    label: str
    value: Any


TagEntry = Union[
    UnkeyedLabel,
    UnkeyedRecord,
    UnkeyedOther,
    LabelOnly,
    LabelUrl,
    LabelRecord,
    LabelOther,
]


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class NormalizedTag:
    """
    The canonical tag record.

    url=None means the tag renders as plain text rather than a link.
    weight has no floor: zero and negative weights are valid.
    """

    label: str
    url: str | None = None
    weight: int = DEFAULT_WEIGHT

    def to_dict(self) -> dict[str, Any]:
        return {"label": self.label, "url": self.url, "weight": self.weight}

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> NormalizedTag:
        return cls(
            label=d["label"],
            url=d.get("url"),
            weight=d.get("weight", DEFAULT_WEIGHT),
        )


@dataclass(frozen=True)
class SizedTag:
    """A NormalizedTag plus its size token (one of SIZE_TOKENS)."""

    label: str
    url: str | None
    weight: int
    size_class: str

    @classmethod
    def from_tag(cls, tag: NormalizedTag, size_class: str) -> SizedTag:
        return cls(label=tag.label, url=tag.url, weight=tag.weight, size_class=size_class)

    def to_dict(self) -> dict[str, Any]:
        return {
            "label": self.label,
            "url": self.url,
            "weight": self.weight,
            "size_class": self.size_class,
        }


@dataclass
class Warning:
    """A non-fatal issue encountered while building a cloud."""

    code: str
    message: str
    details: dict[str, Any] | None = None


@dataclass
class SortResult:
    """Sorted tags plus any warning raised while choosing the strategy."""

    tags: list[NormalizedTag]
    strategy: str
    warnings: list[Warning] = field(default_factory=list)


@dataclass
class CloudResult:
    """
    Result of running the full pipeline once.
    The pipeline never throws — it always returns one of these.
    """

    tags: list[SizedTag]
    warnings: list[Warning] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def is_valid_sort(value: Any) -> bool:
    """Check if a value names a supported sort strategy."""
    return isinstance(value, str) and value in SORT_STRATEGIES
