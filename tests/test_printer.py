import pytest

from trisplit import UNBOUNDED, LayoutState, format_layout, format_layout_details, format_size


@pytest.mark.parametrize(
    'value, expected',
    [
        (None, '-'),
        (UNBOUNDED, 'inf'),
        (0.0, '0'),
        (250.0, '250'),
        (66.66666666666667, '66.6667'),
    ],
)
def test_format_size(value, expected):
    assert format_size(value) == expected


def test_format_layout():
    state = LayoutState(400, start_min=250, start_size=300, middle_min=130, end_min=5, end_size=100)

    assert format_layout(state.view) == 'start=250 middle=130 end=20 (size=400)'


def test_format_layout_collapsed():
    state = LayoutState(100, start_min=250, start_size=300, middle_min=130)

    assert format_layout(state.view) == 'start=- middle=100 end=- (size=100)'


def test_format_layout_details():
    state = LayoutState(600, start_min=250, start_max=350, start_size=300, middle_min=130, end_size=100)

    assert format_layout_details(state.view) == (
        'size: 600\n'
        'start: size=300 ideal=300 bounds=[250, 350]\n'
        'middle: size=200 ideal=200 min=130\n'
        'end: size=100 ideal=100 bounds=[0, inf]\n'
        'resize strategy: preserveSides\n'
        'side resize strategy: consume\n'
    )


def test_format_layout_details_names_custom_strategies():
    def keep_sides(view):
        return {'start_size': view.start_ideal, 'end_size': view.end_ideal}

    state = LayoutState(600, resize_strategy=keep_sides)

    details = format_layout_details(state.view)

    assert 'resize strategy: test_format_layout_details_names_custom_strategies.<locals>.keep_sides' in details
