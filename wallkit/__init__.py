"""
WallKit — server-rendered UI building blocks.

  kernel      — pure tag cloud engine (normalize → sort → size → render)
  components  — component classes built on the kernel (TagCloud)
  config      — environment-driven defaults
"""

from wallkit.components import Component, TagCloud

__all__ = [
    "Component",
    "TagCloud",
]
