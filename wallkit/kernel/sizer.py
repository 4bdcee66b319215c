"""
WallKit Kernel — Size Bucketer

(tags, sizing_enabled) → list[SizedTag]

Each tag's weight is normalized linearly into [0, 1] against the min/max of
the whole cloud, then mapped onto one of len(tokens) ordered size buckets:

    index = floor((weight - min) / (max - min) * bucket_count)

clamped to [0, bucket_count - 1], so the heaviest tag lands in the last
bucket and the lightest (negative weights included) in the first.

When every weight is equal the range is treated as 1, which puts every tag
in bucket 0. Disabled sizing, empty clouds and single-tag clouds get the
base token without looking at weights.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from wallkit.kernel.types import BASE_SIZE, SIZE_TOKENS, NormalizedTag, SizedTag


def assign_sizes(
    tags: Sequence[NormalizedTag],
    sizing_enabled: bool,
    tokens: Sequence[str] = SIZE_TOKENS,
    base: str = BASE_SIZE,
) -> list[SizedTag]:
    """Attach a size token to every tag, preserving order."""
    if not sizing_enabled or len(tags) <= 1 or not tokens:
        return [SizedTag.from_tag(tag, base) for tag in tags]

    weights = [tag.weight for tag in tags]
    min_weight = min(weights)
    spread = (max(weights) - min_weight) or 1
    bucket_count = len(tokens)

    return [
        SizedTag.from_tag(tag, tokens[bucket_index(tag.weight, min_weight, spread, bucket_count)])
        for tag in tags
    ]


def bucket_index(weight: int, min_weight: int, spread: int, bucket_count: int) -> int:
    normalized = (weight - min_weight) / spread
    index = math.floor(normalized * bucket_count)
    # normalized == 1.0 for the heaviest tag
    return max(0, min(bucket_count - 1, index))
