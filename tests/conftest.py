"""
Shared test fixtures for the magickscript test suite.
"""

from unittest.mock import Mock

import pytest

from magickscript.imaging.image import from_buffer


@pytest.fixture
def fake_tool():
    """Mock MagickTool that never spawns ImageMagick.

    Each composite returns a buffered image whose content is the call number,
    so tests can follow the background through successive steps.

    Usage:
        def test_something(fake_tool):
            compose(context, settings, fake_tool)
            assert fake_tool.composite.call_count == 4
    """
    tool = Mock()
    tool.composite.side_effect = lambda images, **kwargs: from_buffer(
        "miff", str(tool.composite.call_count).encode()
    )
    return tool
