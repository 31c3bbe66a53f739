import pytest

from labtrees.heap import MarkHeaps

MARKS = [67, 45, 89, 12, 90, 33, 78, 56]


def test_minimum_and_maximum():
    heaps = MarkHeaps(MARKS)
    assert heaps.minimum() == min(MARKS)
    assert heaps.maximum() == max(MARKS)
    assert len(heaps) == len(MARKS)


def test_heap_properties_hold():
    heaps = MarkHeaps(MARKS)
    low, high = heaps.min_heap, heaps.max_heap
    for i in range(1, len(low)):
        assert low[(i - 1) // 2] <= low[i]
        assert high[(i - 1) // 2] >= high[i]


def test_heaps_hold_same_marks():
    heaps = MarkHeaps(MARKS)
    assert sorted(heaps.min_heap) == sorted(MARKS)
    assert sorted(heaps.max_heap) == sorted(MARKS)


def test_add_updates_extremes():
    heaps = MarkHeaps([50])
    assert heaps.minimum() == 50 and heaps.maximum() == 50
    heaps.add(20)
    heaps.add(95)
    assert heaps.minimum() == 20
    assert heaps.maximum() == 95


@pytest.mark.parametrize("marks", [[5], [3, 3, 3], list(range(30)), list(range(30, 0, -1))])
def test_various_inputs(marks):
    heaps = MarkHeaps(marks)
    assert heaps.minimum() == min(marks)
    assert heaps.maximum() == max(marks)


def test_empty_raises():
    heaps = MarkHeaps()
    with pytest.raises(ValueError):
        heaps.minimum()
    with pytest.raises(ValueError):
        heaps.maximum()