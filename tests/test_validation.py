import math
from collections import OrderedDict
from fractions import Fraction

import numpy as np
import pytest

from trisplit.math_utils import UNBOUNDED, clamp_max_wins, clamp_min_wins, exceeds
from trisplit.validate import (
    IntervalExtremaError,
    LayoutError,
    LayoutTypeError,
    MissingPropertyError,
    NotAFunctionError,
    NotASizeError,
    NotAStringError,
    NotAnObjectError,
    SizeRangeError,
    UnknownPropertyError,
    UnknownStringOptionError,
    is_size_number,
    validate_function,
    validate_object,
    validate_size,
    validate_size_interval,
    validate_string_options,
)


@pytest.mark.parametrize(
    'value, minimum, maximum, expected',
    [
        (5, 0, 10, 5),
        (-1, 0, 10, 0),
        (11, 0, 10, 10),
        (5, 8, 3, 3),
        (1, 8, 3, 3),
    ],
)
def test_clamp_max_wins(value, minimum, maximum, expected):
    assert clamp_max_wins(value, minimum, maximum) == expected


@pytest.mark.parametrize(
    'value, minimum, maximum, expected',
    [
        (5, 0, 10, 5),
        (-1, 0, 10, 0),
        (11, 0, 10, 10),
        (5, 8, 3, 8),
        (9, 8, 3, 8),
    ],
)
def test_clamp_min_wins(value, minimum, maximum, expected):
    assert clamp_min_wins(value, minimum, maximum) == expected


def test_exceeds_ignores_round_off():
    assert not exceeds(470.00000000000006, 470)
    assert not exceeds(470, 470)
    assert exceeds(470.01, 470)
    assert exceeds(1e-6, 0)


@pytest.mark.parametrize(
    'value, expected',
    [
        (0, True),
        (1.5, True),
        (Fraction(1, 3), True),
        (np.float64(2.0), True),
        (UNBOUNDED, True),
        (True, False),
        ('1', False),
        (None, False),
        (math.nan, False),
        (math.inf, False),
        (-math.inf, False),
    ],
)
def test_is_size_number(value, expected):
    assert is_size_number(value) is expected


def test_validate_size_returns_float():
    assert validate_size('size', 3) == 3.0
    assert isinstance(validate_size('size', np.int64(3)), float)


@pytest.mark.parametrize(
    'kwargs, value, ok',
    [
        (dict(minimum=0, maximum=10), 0, True),
        (dict(minimum=0, maximum=10), 10, True),
        (dict(minimum=0, inclusive_minimum=False, maximum=10), 0, False),
        (dict(minimum=0, maximum=10, inclusive_maximum=False), 10, False),
        (dict(minimum=0, maximum=10), 10.5, False),
        (dict(), -0.001, False),
    ],
)
def test_validate_size_bounds(kwargs, value, ok):
    if ok:
        assert validate_size('x', value, **kwargs) == value
    else:
        with pytest.raises(SizeRangeError):
            validate_size('x', value, **kwargs)


def test_size_range_error_message_and_attributes():
    with pytest.raises(SizeRangeError) as exc:
        validate_size('start_size', 12, 0, False, 10, True)

    error = exc.value
    assert isinstance(error, LayoutError)
    assert isinstance(error, ValueError)
    assert error.value_name == 'start_size'
    assert error.value == 12
    assert (error.minimum, error.inclusive_minimum) == (0, False)
    assert (error.maximum, error.inclusive_maximum) == (10, True)
    assert str(error) == (
        'start_size: size is outside the valid range. Expected: 0 < x <= 10; Given: 12.0.'
    )


def test_not_a_size_error_is_a_type_error():
    with pytest.raises(NotASizeError) as exc:
        validate_size('middle_min', '5')

    assert isinstance(exc.value, LayoutTypeError)
    assert isinstance(exc.value, TypeError)
    assert exc.value.value == '5'


def test_validate_size_interval():
    assert validate_size_interval('a_min', 'a_max', 'a', 1, 1) == (1.0, 1.0)

    with pytest.raises(IntervalExtremaError) as exc:
        validate_size_interval('a_min', 'a_max', 'a', 2, 1)

    assert exc.value.value_name == 'a'
    assert (exc.value.minimum, exc.value.maximum) == (2, 1)


def test_validate_size_interval_checks_each_bound_first():
    with pytest.raises(NotASizeError) as exc:
        validate_size_interval('a_min', 'a_max', 'a', 2, None)

    assert exc.value.value_name == 'a_max'


def test_validate_string_options():
    assert validate_string_options('mode', 'b', ('a', 'b')) == 'b'

    with pytest.raises(NotAStringError):
        validate_string_options('mode', 1, ('a', 'b'))

    with pytest.raises(UnknownStringOptionError) as exc:
        validate_string_options('mode', 'B', ('a', 'b'))

    assert exc.value.options == ('a', 'b')
    assert str(exc.value) == "mode: value is not a valid option. Expected: a, b; Given: 'B'."


def test_validate_function():
    validate_function('fn', len)
    validate_function('fn', lambda: None)

    with pytest.raises(NotAFunctionError) as exc:
        validate_function('fn', 'len')

    assert exc.value.value_name == 'fn'


def test_validate_object_accepts_any_mapping():
    value = OrderedDict(size=1, extra=2)

    assert validate_object('obj', value, ('size',), ('extra',)) is value


@pytest.mark.parametrize(
    'value, error_type, key',
    [
        ([('size', 1)], NotAnObjectError, None),
        ({'extra': 2}, MissingPropertyError, 'size'),
        ({'size': 1, 'other': 2}, UnknownPropertyError, 'other'),
    ],
)
def test_validate_object_errors(value, error_type, key):
    with pytest.raises(error_type) as exc:
        validate_object('obj', value, ('size',), ('extra',))

    assert exc.value.value_name == 'obj'
    if key is not None:
        assert exc.value.property == key


@pytest.mark.parametrize('value', [-5, 0, 2, 3, 5, 8, 9, 100])
def test_clamp_winners_hold_on_inverted_bounds(value):
    assert clamp_max_wins(value, 8, 3) == 3
    assert clamp_min_wins(value, 8, 3) == 8
