"""
WallKit Renderer — Tag Cloud Markup Tests

render_cloud(tags) → HTML fragment:

  <div class="wallkit-tagcloud">
    <a href="/tags/php" class="wallkit-tagcloud__tag wallkit-tagcloud__tag--xl">PHP</a>
    <span class="wallkit-tagcloud__tag wallkit-tagcloud__tag--xs">Archive</span>
  </div>

Tests verify:
  - links vs plain spans
  - size modifiers
  - HTML escaping of labels and URLs
  - empty clouds
  - display order
  - the hand-built fallback matches the template output
"""

import re

from wallkit.kernel import renderer
from wallkit.kernel.renderer import (
    _default_cloud_html,
    escape,
    render_cloud,
    size_modifier,
    tag_classes,
)
from wallkit.kernel.types import SizedTag


def assert_contains(html, *fragments):
    for fragment in fragments:
        assert fragment in html, f"Expected to find {fragment!r} in rendered HTML.\nGot:\n{html}"


def assert_not_contains(html, *fragments):
    for fragment in fragments:
        assert fragment not in html, f"Did NOT expect to find {fragment!r} in rendered HTML."


def assert_order(html, *names):
    """Assert that the given names appear in order in the HTML output."""
    positions = []
    for name in names:
        pos = html.find(name)
        assert pos != -1, f"{name!r} not found in HTML"
        positions.append((name, pos))
    for i in range(len(positions) - 1):
        assert positions[i][1] < positions[i + 1][1], f"Expected {positions[i][0]!r} before {positions[i + 1][0]!r}"


def collapse(html):
    """Drop whitespace between tags so layout differences don't matter."""
    return re.sub(r">\s+<", "><", html.strip())


def tag(label, url=None, weight=1, size="base"):
    return SizedTag(label=label, url=url, weight=weight, size_class=size)


# ============================================================================
# Structure
# ============================================================================


class TestStructure:
    def test_container_wraps_everything(self):
        html = render_cloud([tag("PHP", "/tags/php")]).strip()
        assert html.startswith('<div class="wallkit-tagcloud">')
        assert html.endswith("</div>")

    def test_link_for_tag_with_url(self):
        html = render_cloud([tag("PHP", "/tags/php", size="xl")])
        assert_contains(
            html,
            '<a href="/tags/php" class="wallkit-tagcloud__tag wallkit-tagcloud__tag--xl">PHP</a>',
        )
        assert_not_contains(html, "<span")

    def test_span_for_tag_without_url(self):
        html = render_cloud([tag("Archive", None, size="xs")])
        assert_contains(html, '<span class="wallkit-tagcloud__tag wallkit-tagcloud__tag--xs">Archive</span>')
        assert_not_contains(html, "<a ", "href=")

    def test_empty_url_renders_as_span(self):
        html = render_cloud([tag("Draft", "")])
        assert_contains(html, '<span class="wallkit-tagcloud__tag')
        assert_not_contains(html, "href=")

    def test_mixed_links_and_spans(self):
        html = render_cloud([tag("PHP", "/tags/php"), tag("Archive")])
        assert_contains(html, 'href="/tags/php"', '<span class="wallkit-tagcloud__tag')

    def test_custom_classes(self):
        html = render_cloud([tag("PHP", size="lg")], container_class="cloud", tag_class="cloud__tag")
        assert_contains(html, '<div class="cloud">', 'class="cloud__tag cloud__tag--lg"')
        assert_not_contains(html, "wallkit-")


# ============================================================================
# Empty cloud
# ============================================================================


class TestEmptyCloud:
    def test_container_only(self):
        html = render_cloud([])
        assert_contains(html, 'class="wallkit-tagcloud"')
        assert_not_contains(html, "wallkit-tagcloud__tag", "<a", "<span")
        assert collapse(html) == '<div class="wallkit-tagcloud"></div>'


# ============================================================================
# Order
# ============================================================================


class TestOrder:
    def test_display_order_follows_input(self):
        html = render_cloud([tag("Zebra"), tag("Apple"), tag("Mango")])
        assert_order(html, "Zebra", "Apple", "Mango")


# ============================================================================
# Escaping
# ============================================================================


class TestEscaping:
    def test_label_escaped(self):
        html = render_cloud([tag('Test <script>alert("xss")</script>', "/tags/xss")])
        assert_not_contains(html, "<script>")
        assert_contains(html, "&lt;script&gt;")

    def test_ampersand_and_angle_brackets(self):
        html = render_cloud([tag("Normal & Special > Characters")])
        assert_contains(html, "Normal &amp; Special &gt; Characters")

    def test_url_attribute_escaped(self):
        html = render_cloud([tag("Q", '/search?q="x"&page=2')])
        assert_contains(html, 'href="/search?q=&quot;x&quot;&amp;page=2"')

    def test_escape_helper(self):
        assert escape('<a href="x">&</a>') == "&lt;a href=&quot;x&quot;&gt;&amp;&lt;/a&gt;"
        assert escape(5) == "5"


# ============================================================================
# Class helpers
# ============================================================================


class TestClassHelpers:
    def test_tag_classes(self):
        assert tag_classes(tag("PHP", size="lg")) == ["wallkit-tagcloud__tag", "wallkit-tagcloud__tag--lg"]

    def test_size_modifier(self):
        assert size_modifier("xs") == "wallkit-tagcloud__tag--xs"
        assert size_modifier("xs", "cloud__tag") == "cloud__tag--xs"


# ============================================================================
# Fallback rendering
# ============================================================================


class TestFallback:
    def test_fallback_matches_template(self):
        tags = [tag("PHP", "/tags/php", 10, "xl"), tag("Archive & Old", None, 1, "xs")]
        from_template = render_cloud(tags)
        by_hand = _default_cloud_html(tags, renderer.CONTAINER_CLASS, renderer.TAG_CLASS)
        assert collapse(from_template) == collapse(by_hand)

    def test_broken_template_falls_back(self):
        tags = [tag("PHP", "/tags/php", size="xl")]
        html = render_cloud(tags, template="<div>{{#tags}}{{/nope}}</div>")
        assert_contains(
            html,
            '<a href="/tags/php" class="wallkit-tagcloud__tag wallkit-tagcloud__tag--xl">PHP</a>',
        )

    def test_fallback_empty(self):
        assert _default_cloud_html([], "wallkit-tagcloud", "wallkit-tagcloud__tag") == (
            '<div class="wallkit-tagcloud">\n</div>'
        )
