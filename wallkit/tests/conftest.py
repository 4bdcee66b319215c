"""
Pytest configuration and fixtures for WallKit component tests.
"""

from __future__ import annotations

import pytest

_ENV_VARS = (
    "WALLKIT_TAGCLOUD_SORT_BY",
    "WALLKIT_TAGCLOUD_FALLBACK_LABEL",
    "WALLKIT_TAGCLOUD_AUTO_SIZE",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Component defaults come from the environment; start every test from a clean one."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def simple_tags():
    return ["PHP", "JavaScript", "HTML", "CSS", "Python"]


@pytest.fixture
def tags_with_urls():
    return {
        "PHP": "/tags/php",
        "JavaScript": "/tags/js",
        "HTML": "/tags/html",
    }


@pytest.fixture
def tags_with_weights_and_urls():
    return {
        "PHP": {"url": "/tags/php", "weight": 10},
        "JavaScript": {"url": "/tags/js", "weight": 8},
        "HTML": {"weight": 5},
    }


@pytest.fixture
def mixed_tags():
    return [
        "PHP",
        ("JavaScript", "/tags/js"),
        ("HTML", {"url": "/tags/html", "weight": 7}),
        ("CSS", {"weight": 3}),
        ("Python", {"label": "Python Lang", "url": "/tags/python", "weight": 6}),
    ]
