"""
WallKit Kernel — Renderer (Tag Cloud)

Pure function: list[SizedTag] → HTML fragment string
No IO. Deterministic: same tags → same output, always.

The markup comes from a Mustache template rendered with chevron. `{{…}}`
tags escape HTML, so labels and URLs are safe to pass through as-is.
A linked tag renders as <a href>, a tag without a URL as a plain <span>;
the size token becomes a `<tag_class>--<token>` CSS modifier.
"""

from __future__ import annotations

from collections.abc import Sequence
from html import escape as _html_escape
from typing import Any

import chevron

from wallkit.kernel.types import SizedTag

CONTAINER_CLASS = "wallkit-tagcloud"
TAG_CLASS = "wallkit-tagcloud__tag"

TAG_CLOUD_TEMPLATE = (
    '<div class="{{container_class}}">\n'
    "{{#tags}}\n"
    "{{#has_url}}\n"
    '  <a href="{{url}}" class="{{classes}}">{{label}}</a>\n'
    "{{/has_url}}\n"
    "{{^has_url}}\n"
    '  <span class="{{classes}}">{{label}}</span>\n'
    "{{/has_url}}\n"
    "{{/tags}}\n"
    "</div>"
)

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def render_cloud(
    tags: Sequence[SizedTag],
    *,
    container_class: str = CONTAINER_CLASS,
    tag_class: str = TAG_CLASS,
    template: str = TAG_CLOUD_TEMPLATE,
) -> str:
    """
    Render a sized cloud as an HTML fragment.
    Falls back to hand-built markup if the template fails to render.
    """
    context = _build_cloud_context(tags, container_class, tag_class)
    try:
        rendered = chevron.render(template, context)
    except Exception:
        rendered = _default_cloud_html(tags, container_class, tag_class)
    return rendered


def tag_classes(tag: SizedTag, tag_class: str = TAG_CLASS) -> list[str]:
    """CSS classes for one tag: the element class plus its size modifier."""
    return [tag_class, size_modifier(tag.size_class, tag_class)]


def size_modifier(size_class: str, tag_class: str = TAG_CLASS) -> str:
    """Size token to CSS modifier: "lg" → "wallkit-tagcloud__tag--lg"."""
    return f"{tag_class}--{size_class}"


def escape(text: str) -> str:
    """HTML-escape user content."""
    return _html_escape(str(text), quote=True)


# ---------------------------------------------------------------------------
# Internals
# ---------------------------------------------------------------------------


def _build_cloud_context(
    tags: Sequence[SizedTag],
    container_class: str,
    tag_class: str,
) -> dict[str, Any]:
    """Build the Mustache context; one dict per tag, in display order."""
    return {
        "container_class": container_class,
        "tags": [_build_tag_context(tag, tag_class) for tag in tags],
    }


def _build_tag_context(tag: SizedTag, tag_class: str) -> dict[str, Any]:
    return {
        "label": tag.label,
        "url": tag.url or "",
        "has_url": bool(tag.url),
        "weight": tag.weight,
        "classes": " ".join(tag_classes(tag, tag_class)),
    }


def _default_cloud_html(
    tags: Sequence[SizedTag],
    container_class: str,
    tag_class: str,
) -> str:
    """Fallback rendering when the template cannot be rendered."""
    parts = [f'<div class="{escape(container_class)}">']
    for tag in tags:
        classes = escape(" ".join(tag_classes(tag, tag_class)))
        label = escape(tag.label)
        if tag.url:
            parts.append(f'  <a href="{escape(tag.url)}" class="{classes}">{label}</a>')
        else:
            parts.append(f'  <span class="{classes}">{label}</span>')
    parts.append("</div>")
    return "\n".join(parts)
