"""Test the resolution of shape sizes."""

from math import inf

import pytest

from shapebox.layout.geometry import DegenerateGeometryError
from shapebox.layout.size import (
    UnresolvedParentError,
    fixed,
    relative,
    resolve_padding,
    resolve_size,
)
from shapebox.units import LENGTHS_TO_PIXELS, Dimension

from .testing_utils import FixedContent, ReflowingContent, assert_no_logs


@assert_no_logs
@pytest.mark.parametrize('containing_block', (
    (100, 100), (0, 0), (None, None), (inf, 'auto')))
@pytest.mark.parametrize('padding', (0, 5, 100))
def test_fixed_without_content(containing_block, padding):
    assert resolve_size(
        fixed(30), fixed(20), containing_block, padding=padding) == (30, 20)


@assert_no_logs
def test_fixed_units():
    width, height = resolve_size(fixed(3, 'cm'), fixed(2, 'cm'), (None, None))
    assert width == pytest.approx(3 * LENGTHS_TO_PIXELS['cm'])
    assert height == pytest.approx(2 * LENGTHS_TO_PIXELS['cm'])


@assert_no_logs
def test_fixed_does_not_measure():
    content = FixedContent(50, 20)
    assert resolve_size(
        fixed(30), relative(0.5), (100, 200), content, padding=4) == (30, 100)
    assert content.measures == []


@assert_no_logs
@pytest.mark.parametrize('fraction, parent', (
    (1, 300), (0.5, 300), (0.25, 80), (0, 300), (2, 10)))
def test_relative(fraction, parent):
    width, height = resolve_size(
        relative(fraction), relative(fraction), (parent, parent * 2))
    assert width == pytest.approx(fraction * parent)
    assert height == pytest.approx(fraction * parent * 2)


@assert_no_logs
@pytest.mark.parametrize('parent', (None, 'auto', inf))
def test_relative_unresolved_parent(parent):
    with pytest.raises(UnresolvedParentError):
        resolve_size(relative(1), fixed(10), (parent, 100))
    with pytest.raises(UnresolvedParentError):
        resolve_size(fixed(10), relative(1), (100, parent))


@assert_no_logs
def test_relative_unresolved_parent_for_other_axis():
    # Only the parent dimension of the relative axis matters.
    assert resolve_size(relative(0.5), fixed(10), (100, None)) == (50, 10)


@assert_no_logs
@pytest.mark.parametrize('width, height', (
    ('auto', 'auto'), ('auto', fixed(10)), (fixed(10), 'auto'),
    (None, None)))
def test_auto_without_content(width, height):
    result = resolve_size(width, height, (100, 100), padding=5)
    expected = tuple(
        0 if spec in ('auto', None) else 10 for spec in (width, height))
    assert result == expected


@assert_no_logs
def test_auto_with_content():
    content = FixedContent(50, 20)
    assert resolve_size('auto', 'auto', (None, None), content, 4) == (58, 28)


@assert_no_logs
def test_auto_measure_order():
    content = FixedContent(50, 20)
    resolve_size('auto', 'auto', (100, 100), content, 4)
    # Width first, unconstrained, then height in the resolved width.
    assert content.measures == [(inf, inf), (50, inf)]


@assert_no_logs
def test_auto_width_with_fixed_height():
    content = FixedContent(50, 20)
    assert resolve_size('auto', fixed(40), (None, None), content, 4) == (
        58, 40)
    assert content.measures == [(inf, 32)]


@assert_no_logs
def test_auto_height_with_fixed_width():
    content = ReflowingContent(100, 10)
    assert resolve_size(fixed(60), 'auto', (None, None), content, 5) == (
        60, 30)
    assert content.measures == [(50, inf)]


@assert_no_logs
def test_auto_height_reflow():
    content = ReflowingContent(100, 10)
    width, height = resolve_size(relative(0.5), 'auto', (80, None), content)
    assert (width, height) == (40, 25)


@assert_no_logs
def test_auto_idempotence():
    content = ReflowingContent(120, 12)
    first = resolve_size('auto', 'auto', (200, None), content, 3)
    second = resolve_size('auto', 'auto', (200, None), content, 3)
    assert first == second == (126, 18)


@assert_no_logs
@pytest.mark.parametrize('width, height', (
    (fixed(-1), fixed(10)), (fixed(10), relative(-0.5))))
def test_negative_size(width, height):
    with pytest.raises(DegenerateGeometryError):
        resolve_size(width, height, (100, 100))


@assert_no_logs
def test_negative_measure():
    with pytest.raises(DegenerateGeometryError):
        resolve_size('auto', 'auto', (100, 100), FixedContent(-10, 5))


@assert_no_logs
@pytest.mark.parametrize('padding, parent_width, used', (
    (None, 100, 0),
    (Dimension(3, 'pt'), None, 4),
    (Dimension(10, '%'), 200, 20),
    (Dimension(0, None), None, 0),
))
def test_resolve_padding(padding, parent_width, used):
    assert resolve_padding(padding, parent_width) == pytest.approx(used)


@assert_no_logs
def test_resolve_padding_errors():
    with pytest.raises(UnresolvedParentError):
        resolve_padding(Dimension(10, '%'), inf)
    with pytest.raises(DegenerateGeometryError):
        resolve_padding(Dimension(-1, 'px'), 100)
