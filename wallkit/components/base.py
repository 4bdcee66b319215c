"""
WallKit Components — Base

Every component follows the same lifecycle:

    construct → prepare → render

construct validates props once and keeps them immutable. prepare returns
non-fatal configuration problems without logging them. render returns an
HTML fragment string and is the one step that logs.
"""

from __future__ import annotations

from wallkit.kernel.types import Warning


class Component:
    """Base for server-rendered building blocks. Renders nothing by default."""

    def prepare(self) -> list[Warning]:
        """Check the configuration. Returns non-fatal warnings; never raises."""
        return []

    def render(self) -> str:
        return ""

    def __str__(self) -> str:
        return self.render()
