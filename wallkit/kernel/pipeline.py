"""
WallKit Kernel — Tag Cloud Pipeline

Pure function: (raw entries, sort_by, auto_size) → CloudResult
No IO. No logging. Stages run strictly in sequence:

    normalize → sort → assign sizes

Warnings (e.g. an unknown sort strategy) ride along in the result instead of
being logged here; the component layer decides how to surface them.
"""

from __future__ import annotations

import random
from collections.abc import Iterable, Sequence
from typing import Any

from wallkit.kernel.normalizer import normalize
from wallkit.kernel.sizer import assign_sizes
from wallkit.kernel.sorter import sort_tags
from wallkit.kernel.types import (
    BASE_SIZE,
    DEFAULT_FALLBACK_LABEL,
    SIZE_TOKENS,
    CloudResult,
)


def build_cloud(
    entries: Iterable[tuple[Any, Any]],
    sort_by: str,
    auto_size: bool,
    *,
    rng: random.Random | None = None,
    fallback_label: str = DEFAULT_FALLBACK_LABEL,
    tokens: Sequence[str] = SIZE_TOKENS,
    base: str = BASE_SIZE,
) -> CloudResult:
    """
    Run the full pipeline once.
    Always returns one SizedTag per entry, never raises for data-shaped input.
    """
    tags = normalize(entries, fallback_label)
    sorted_result = sort_tags(tags, sort_by, rng)
    sized = assign_sizes(sorted_result.tags, auto_size, tokens, base)
    return CloudResult(tags=sized, warnings=list(sorted_result.warnings))
