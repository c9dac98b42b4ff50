import logging

import pytest

from storefront.utils.logging import resolve_level


@pytest.mark.parametrize("name,expected", [
    ("DEBUG", logging.DEBUG),
    ("warning", logging.WARNING),
    (" error ", logging.ERROR),
    ("VERBOSE", logging.INFO),
    ("", logging.INFO),
])
def test_resolve_level(name, expected):
    assert resolve_level(name) == expected
