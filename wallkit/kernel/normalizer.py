"""
WallKit Kernel — Normalizer

Pure function: raw (key, value) pairs → list[NormalizedTag]
No side effects. Total: every input shape has a defined fallback, nothing raises.

Two steps per entry:
  classify_entry  — inspect the raw (key, value) once, pick a TagEntry variant
  normalize_entry — dispatch on the variant type to build the NormalizedTag

Output order == input order. No sorting happens here.
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Callable, Iterable, Mapping
from decimal import Decimal
from typing import Any

from wallkit.kernel.types import (
    DEFAULT_FALLBACK_LABEL,
    DEFAULT_WEIGHT,
    LabelOnly,
    LabelOther,
    LabelRecord,
    LabelUrl,
    NormalizedTag,
    TagEntry,
    UnkeyedLabel,
    UnkeyedOther,
    UnkeyedRecord,
)

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def raw_entries(tags: Any) -> list[tuple[Any, Any]]:
    """
    Turn the component's `tags` argument into ordered (key, value) pairs.

      {"PHP": "/tags/php", 0: "CSS"}      → [("PHP", "/tags/php"), (0, "CSS")]
      ["PHP", ("JS", "/tags/js")]         → [(0, "PHP"), ("JS", "/tags/js")]
      "PHP"                               → [(0, "PHP")]
      None                                → []

    In a sequence, a 2-tuple is a (key, value) pair; any other item is
    positional and keyed by its index.

    Record values are copied, so later changes to the caller's dicts do not
    reach the entries.
    """
    if tags is None:
        return []
    if isinstance(tags, Mapping):
        return [(key, _snapshot(value)) for key, value in tags.items()]
    if isinstance(tags, str) or not isinstance(tags, Iterable):
        return [(0, tags)]

    entries: list[tuple[Any, Any]] = []
    for index, item in enumerate(tags):
        if isinstance(item, tuple) and len(item) == 2:
            entries.append((item[0], _snapshot(item[1])))
        else:
            entries.append((index, _snapshot(item)))
    return entries


def classify_entry(key: Any, value: Any) -> TagEntry:
    """
    Pick the entry variant for one raw (key, value) pair.
    Only string keys carry a label; anything else (e.g. a list index) is positional.
    """
    if not isinstance(key, str):
        if isinstance(value, str):
            return UnkeyedLabel(label=value)
        record = _as_record(value)
        if record is not None:
            return UnkeyedRecord(record=record)
        return UnkeyedOther(value=value)

    if value is None:
        return LabelOnly(label=key)
    if isinstance(value, str):
        return LabelUrl(label=key, url=value)
    record = _as_record(value)
    if record is not None:
        return LabelRecord(label=key, record=record)
    return LabelOther(label=key, value=value)


def normalize_entry(entry: TagEntry, fallback_label: str = DEFAULT_FALLBACK_LABEL) -> NormalizedTag:
    """Build the canonical tag for one classified entry."""
    handler = _NORMALIZERS[type(entry)]
    return handler(entry, fallback_label)


def normalize(
    entries: Iterable[tuple[Any, Any]],
    fallback_label: str = DEFAULT_FALLBACK_LABEL,
) -> list[NormalizedTag]:
    """
    Normalize ordered (key, value) pairs into NormalizedTags.
    Exactly one tag per entry, in input order.
    """
    return [normalize_entry(classify_entry(key, value), fallback_label) for key, value in entries]


# ---------------------------------------------------------------------------
# Per-variant normalizers
# ---------------------------------------------------------------------------


def _normalize_unkeyed_label(entry: UnkeyedLabel, fallback_label: str) -> NormalizedTag:
    return NormalizedTag(label=entry.label)


def _normalize_unkeyed_record(entry: UnkeyedRecord, fallback_label: str) -> NormalizedTag:
    url = _record_url(entry.record)
    label = _record_label(entry.record)
    if label is None:
        label = _label_from_url(url) or fallback_label
    return NormalizedTag(label=label, url=url, weight=_record_weight(entry.record))


def _normalize_unkeyed_other(entry: UnkeyedOther, fallback_label: str) -> NormalizedTag:
    return NormalizedTag(label=fallback_label)


def _normalize_label_only(entry: LabelOnly, fallback_label: str) -> NormalizedTag:
    return NormalizedTag(label=entry.label)


def _normalize_label_url(entry: LabelUrl, fallback_label: str) -> NormalizedTag:
    return NormalizedTag(label=entry.label, url=entry.url)


def _normalize_label_record(entry: LabelRecord, fallback_label: str) -> NormalizedTag:
    label = _record_label(entry.record)
    return NormalizedTag(
        label=entry.label if label is None else label,
        url=_record_url(entry.record),
        weight=_record_weight(entry.record),
    )


def _normalize_label_other(entry: LabelOther, fallback_label: str) -> NormalizedTag:
    return NormalizedTag(label=entry.label)


_NORMALIZERS: dict[type, Callable[[Any, str], NormalizedTag]] = {
    UnkeyedLabel: _normalize_unkeyed_label,
    UnkeyedRecord: _normalize_unkeyed_record,
    UnkeyedOther: _normalize_unkeyed_other,
    LabelOnly: _normalize_label_only,
    LabelUrl: _normalize_label_url,
    LabelRecord: _normalize_label_record,
    LabelOther: _normalize_label_other,
}


# ---------------------------------------------------------------------------
# Record field helpers
# ---------------------------------------------------------------------------


def _snapshot(value: Any) -> Any:
    """Shallow copy of a mapping record; everything else is kept as is."""
    if isinstance(value, Mapping):
        return dict(value)
    return value


def _as_record(value: Any) -> Mapping[str, Any] | None:
    """Records are mappings; an already-normalized tag counts as one too."""
    if isinstance(value, NormalizedTag):
        return value.to_dict()
    if isinstance(value, Mapping):
        return value
    return None


def _record_label(record: Mapping[str, Any]) -> str | None:
    label = record.get("label")
    if label is None:
        return None
    return label if isinstance(label, str) else str(label)


def _record_url(record: Mapping[str, Any]) -> str | None:
    url = record.get("url")
    return url if isinstance(url, str) else None


def _record_weight(record: Mapping[str, Any]) -> int:
    return coerce_weight(record.get("weight"))


def coerce_weight(value: Any) -> int:
    """
    Best-effort int conversion for a record's weight.

      5 → 5, -3 → -3, False → 0, 7.9 → 7, Fraction(15, 2) → 7, "7" → 7, "7.9" → 7
      None, "heavy", nan, inf → DEFAULT_WEIGHT

    Any real number (numbers.Real or Decimal) is truncated toward zero.
    """
    if value is None:
        return DEFAULT_WEIGHT
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            value = float(text)
        except ValueError:
            return DEFAULT_WEIGHT
    if isinstance(value, Decimal):
        return int(value) if value.is_finite() else DEFAULT_WEIGHT
    if isinstance(value, numbers.Real):
        return math.trunc(value) if math.isfinite(value) else DEFAULT_WEIGHT
    return DEFAULT_WEIGHT


def _label_from_url(url: str | None) -> str:
    """Last path segment of a URL: "/tags/python/" → "python"."""
    if not url:
        return ""
    return url.rstrip("/").rsplit("/", 1)[-1]
