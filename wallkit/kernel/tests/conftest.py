"""
Kernel test configuration.

Kernel tests are pure: no logging assertions, no environment. Anything that
needs a reproducible "random" order gets a seeded random.Random.
"""

import random

import pytest

from wallkit.kernel.types import NormalizedTag


@pytest.fixture
def seeded_rng():
    return random.Random(1234)


@pytest.fixture
def weighted_tags():
    """PHP(10), JavaScript(8), HTML(5) in a deliberately scrambled order."""
    return [
        NormalizedTag(label="HTML", url=None, weight=5),
        NormalizedTag(label="PHP", url="/tags/php", weight=10),
        NormalizedTag(label="JavaScript", url="/tags/js", weight=8),
    ]
