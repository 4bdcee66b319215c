"""
WallKit Kernel — Sorter

(tags, strategy) → SortResult
The input list is never modified; a new list is always returned.

Strategies:
  weight   — descending by weight, stable (ties keep input order)
  alphabet — ascending by label, code point order (not locale collation)
  random   — uniform shuffle from an injectable random source

An unknown strategy is not an error: it produces one UNSUPPORTED_SORT
warning and falls back to random so rendering always completes.
"""

from __future__ import annotations

import random
from collections.abc import Sequence

from wallkit.kernel.types import (
    FALLBACK_SORT,
    SORT_ALPHABET,
    SORT_STRATEGIES,
    SORT_WEIGHT,
    UNSUPPORTED_SORT,
    NormalizedTag,
    SortResult,
    Warning,
    is_valid_sort,
)

# Default source for the random strategy: OS entropy, no process-wide seed
_SYSTEM_RANDOM = random.SystemRandom()


def sort_tags(
    tags: Sequence[NormalizedTag],
    strategy: str,
    rng: random.Random | None = None,
) -> SortResult:
    """
    Reorder tags by the named strategy.
    Pass `rng` (e.g. random.Random(42)) to make the random strategy reproducible.
    """
    warnings: list[Warning] = []
    warning = check_sort(strategy)
    if warning is not None:
        warnings.append(warning)
        strategy = FALLBACK_SORT

    if strategy == SORT_WEIGHT:
        ordered = sort_by_weight(tags)
    elif strategy == SORT_ALPHABET:
        ordered = sort_by_alphabet(tags)
    else:
        ordered = shuffle_tags(tags, rng)

    return SortResult(tags=ordered, strategy=strategy, warnings=warnings)


def sort_by_weight(tags: Sequence[NormalizedTag]) -> list[NormalizedTag]:
    # sorted() is stable; reverse=True keeps ties in input order
    return sorted(tags, key=lambda t: t.weight, reverse=True)


def sort_by_alphabet(tags: Sequence[NormalizedTag]) -> list[NormalizedTag]:
    return sorted(tags, key=lambda t: t.label)


def shuffle_tags(tags: Sequence[NormalizedTag], rng: random.Random | None = None) -> list[NormalizedTag]:
    shuffled = list(tags)
    (rng or _SYSTEM_RANDOM).shuffle(shuffled)
    return shuffled


def check_sort(strategy: str) -> Warning | None:
    """Return an UNSUPPORTED_SORT warning for an unknown strategy, else None."""
    if is_valid_sort(strategy):
        return None
    return Warning(
        code=UNSUPPORTED_SORT,
        message=f"Unsupported sort strategy: {strategy!r}",
        details={"sort_by": strategy, "allowed": list(SORT_STRATEGIES), "fallback": FALLBACK_SORT},
    )
