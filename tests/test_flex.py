import logging

import pytest

from trisplit import UNBOUNDED, FlexSegment, distribute, flex_segments


def test_distribute_scales_by_weight():
    sizes = distribute([100, 200, 100], [0, 0, 0], [UNBOUNDED] * 3, 800)

    assert sizes == pytest.approx([200, 400, 200])


def test_distribute_redistributes_after_clamping():
    sizes = distribute([100, 100], [0, 0], [120, UNBOUNDED], 300)

    assert sizes == pytest.approx([120, 180])


def test_distribute_respects_minimums_when_shrinking():
    sizes = distribute([300, 130, 100], [250, 130, 5], [350, UNBOUNDED, 150], 385)

    assert sizes == pytest.approx([250, 130, 5])


def test_absent_slot_takes_no_space():
    sizes = flex_segments(
        [FlexSegment(None, 50, 100), FlexSegment(100), FlexSegment(100)],
        300,
    )

    assert sizes[0] is None
    assert sizes[1:] == pytest.approx([150, 150])


def test_zero_weight_slot_is_held_at_its_minimum():
    sizes = flex_segments([FlexSegment(0, 40, 100), FlexSegment(100)], 300)

    assert sizes == pytest.approx([40, 260])


def test_pinned_slot_does_not_move():
    sizes = flex_segments(
        [FlexSegment(300, 250, 350), FlexSegment(130, 130, 130), FlexSegment(100, 5, 150)],
        510,
    )

    assert sizes == pytest.approx([285, 130, 95])


def test_unreachable_target_stops_at_bounds():
    sizes = distribute([10, 10], [0, 0], [20, 30], 1000)

    assert sizes == [20.0, 30.0]


def test_no_flexible_slots_returns_initial_sizes():
    assert distribute([None, 0], [0, 5], [10, 10], 100) == [None, 5.0]
    assert distribute([], [], [], 100) == []


def test_mismatched_lengths_raise():
    with pytest.raises(ValueError):
        distribute([1, 2], [0], [10, 10], 5)


def test_distribute_logs_each_pass(caplog):
    with caplog.at_level(logging.DEBUG, logger='trisplit.flex'):
        distribute([100, 100], [0, 0], [120, UNBOUNDED], 300)

    messages = [record.getMessage() for record in caplog.records]
    assert any(message.startswith('distribute: pass=1') for message in messages)
    assert any(message.startswith('Entering distribute') for message in messages)


def test_inverted_bounds_never_exceed_the_maximum():
    sizes = distribute([10, 100], [8, 0], [3, UNBOUNDED], 200)

    assert sizes[0] == 3.0
    assert sizes[1] == pytest.approx(197)


@pytest.mark.parametrize(
    'ideals, minimums, maximums, target',
    [
        ([300, 130, 100], [250, 130, 5], [350, UNBOUNDED, 150], 385),
        ([300, 130, 100], [250, 130, 5], [350, 130, 150], 510),
        ([300, 200, 100], [250, 130, 5], [350, UNBOUNDED, 150], 450),
        ([300, 200, 100], [250, 130, 5], [350, UNBOUNDED, 150], 777),
        ([None, 450, 5], [0, 450, 5], [0, 450, 150], 600),
        ([0, 600, None], [50, 100, 0], [200, UNBOUNDED, 0], 600),
        ([17.5, 3.25, 91], [0, 1, 10], [40, 20, 500], 123.456),
        ([10, 10], [0, 0], [20, 30], 1000),
    ],
)
def test_distribution_is_stable_when_fed_back(ideals, minimums, maximums, target):
    first = distribute(ideals, minimums, maximums, target)

    second = distribute(first, minimums, maximums, target)

    for before, after in zip(first, second):
        if before is None:
            assert after is None
        else:
            assert after == pytest.approx(before)
