"""
WallKit Components — TagCloud

A cloud of tags, each rendered as a link (when it has a URL) or plain text,
sized by its weight relative to the rest of the cloud.

    cloud = TagCloud(
        {
            "PHP": {"url": "/tags/php", "weight": 10},
            "JavaScript": "/tags/js",
            "Archive": None,
        },
        sort_by="weight",
    )
    html = str(cloud)

Accepted tag shapes (see kernel.normalizer):
  "PHP"                                  plain label, no link
  "PHP" => "/tags/php"                   label → url
  "PHP" => {"url", "weight", "label"}    label → record (record label wins)
  "PHP" => None                          label, no link
  {"url": "/tags/php", "weight": 3}      unkeyed record (label from url)

All processing happens per call from the immutable props; nothing is cached.
An unsupported sort_by is logged as a warning once per render and the cloud
is shuffled instead.
"""

from __future__ import annotations

import logging
import random
from typing import Any

from wallkit.components.base import Component
from wallkit.config import settings
from wallkit.kernel.normalizer import raw_entries
from wallkit.kernel.pipeline import build_cloud
from wallkit.kernel.renderer import CONTAINER_CLASS, render_cloud, tag_classes
from wallkit.kernel.sorter import check_sort
from wallkit.kernel.types import CloudResult, SizedTag, Warning
from wallkit.models import TagCloudProps

logger = logging.getLogger(__name__)


class TagCloud(Component):
    """Tag cloud component: normalize → sort → size → render."""

    def __init__(
        self,
        tags: Any = None,
        sort_by: str | None = None,
        auto_size: bool | None = None,
        *,
        fallback_label: str | None = None,
        rng: random.Random | None = None,
    ) -> None:
        """
        Args:
            tags: Mapping of label → url/record/None, or a sequence of labels,
                records and (label, value) pairs.
            sort_by: "weight", "alphabet" or "random" (default from settings).
            auto_size: Size tags by weight (default from settings).
            fallback_label: Label for unkeyed records with no label and no url.
            rng: Random source for the random strategy (tests pass a seeded one).

        Raises:
            pydantic.ValidationError: If a prop has the wrong type.
        """
        self._tags = tags
        self._rng = rng
        self.props = TagCloudProps(
            entries=raw_entries(tags),
            sort_by=settings.TAGCLOUD_SORT_BY if sort_by is None else sort_by,
            auto_size=settings.TAGCLOUD_AUTO_SIZE if auto_size is None else auto_size,
            fallback_label=settings.TAGCLOUD_FALLBACK_LABEL if fallback_label is None else fallback_label,
        )

    @property
    def tags(self) -> Any:
        """The tags exactly as passed to the constructor."""
        return self._tags

    @property
    def sort_by(self) -> str:
        return self.props.sort_by

    @property
    def auto_size(self) -> bool:
        return self.props.auto_size

    # -----------------------------------------------------------------------
    # Lifecycle
    # -----------------------------------------------------------------------

    def prepare(self) -> list[Warning]:
        """
        Validate sort_by. Problems are returned, never raised or logged;
        the render that follows reports them once.
        """
        warnings: list[Warning] = []
        warning = check_sort(self.props.sort_by)
        if warning is not None:
            warnings.append(warning)
        return warnings

    def process(self) -> CloudResult:
        """Run the pipeline once. Pure: warnings are returned, not logged."""
        return build_cloud(
            self.props.entries,
            self.props.sort_by,
            self.props.auto_size,
            rng=self._rng,
            fallback_label=self.props.fallback_label,
        )

    def get_processed_tags(self) -> list[SizedTag]:
        """Normalized, sorted and sized tags, ready for a template."""
        result = self.process()
        _log_warnings(result.warnings)
        return result.tags

    def render(self) -> str:
        return render_cloud(self.get_processed_tags(), container_class=CONTAINER_CLASS)

    # -----------------------------------------------------------------------
    # Helpers for templates
    # -----------------------------------------------------------------------

    def has_tags(self) -> bool:
        return bool(self.props.entries)

    def get_tags_count(self) -> int:
        return len(self.props.entries)

    def get_container_classes(self) -> list[str]:
        return [CONTAINER_CLASS]

    def get_tag_classes(self, tag: SizedTag) -> list[str]:
        return tag_classes(tag)


def _log_warnings(warnings: list[Warning]) -> None:
    for warning in warnings:
        details = warning.details or {}
        if "fallback" in details:
            logger.warning("tag_cloud: %s, falling back to %s", warning.message, details["fallback"])
        else:
            logger.warning("tag_cloud: %s", warning.message)
