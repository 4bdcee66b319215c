"""
WallKit configuration — all environment variables in one place.

Read from environment at access time so a host process (or a test) can
change defaults without re-importing the package.
"""

from __future__ import annotations

import os

from wallkit.kernel.types import DEFAULT_FALLBACK_LABEL, SORT_RANDOM

_FALSE_VALUES = {"0", "false", "no", "off"}


class Settings:
    """Component defaults from environment variables."""

    # Tag cloud
    @property
    def TAGCLOUD_SORT_BY(self) -> str:
        return os.environ.get("WALLKIT_TAGCLOUD_SORT_BY", SORT_RANDOM)

    @property
    def TAGCLOUD_FALLBACK_LABEL(self) -> str:
        # Shown for unkeyed records with neither a label nor a url
        return os.environ.get("WALLKIT_TAGCLOUD_FALLBACK_LABEL", DEFAULT_FALLBACK_LABEL)

    @property
    def TAGCLOUD_AUTO_SIZE(self) -> bool:
        raw = os.environ.get("WALLKIT_TAGCLOUD_AUTO_SIZE", "").strip().lower()
        return raw not in _FALSE_VALUES


# Singleton instance
settings = Settings()
