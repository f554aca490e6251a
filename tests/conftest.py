"""Configuration for shapebox tests."""

import pytest
from tinycss2.color4 import parse_color

from .testing_utils import FixedContent


@pytest.fixture
def blue():
    return parse_color('blue')


@pytest.fixture
def red():
    return parse_color('red')


@pytest.fixture
def content():
    return FixedContent(50, 20)
