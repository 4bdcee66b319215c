"""WallKit components — server-rendered UI building blocks."""

from wallkit.components.base import Component
from wallkit.components.tag_cloud import TagCloud

__all__ = [
    "Component",
    "TagCloud",
]
