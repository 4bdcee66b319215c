"""
WallKit Kernel — the pure tag cloud engine.

Three stages:
  normalizer — raw (key, value) pairs → NormalizedTag  (total, never raises)
  sorter     — weight / alphabet / random ordering    (unknown → warning + random)
  sizer      — min/max weight → one of SIZE_TOKENS

pipeline.build_cloud runs them in order and returns a CloudResult.
renderer.render_cloud turns the sized tags into HTML via a chevron template.
"""

from wallkit.kernel.normalizer import classify_entry, normalize, raw_entries
from wallkit.kernel.pipeline import build_cloud
from wallkit.kernel.renderer import render_cloud
from wallkit.kernel.sizer import assign_sizes
from wallkit.kernel.sorter import sort_tags
from wallkit.kernel.types import (
    BASE_SIZE,
    SIZE_TOKENS,
    SORT_STRATEGIES,
    CloudResult,
    NormalizedTag,
    SizedTag,
    Warning,
)

__all__ = [
    "raw_entries",
    "classify_entry",
    "normalize",
    "sort_tags",
    "assign_sizes",
    "build_cloud",
    "render_cloud",
    "NormalizedTag",
    "SizedTag",
    "CloudResult",
    "Warning",
    "SIZE_TOKENS",
    "BASE_SIZE",
    "SORT_STRATEGIES",
]
