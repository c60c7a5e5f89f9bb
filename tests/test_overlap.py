from collections import Counter

from slotmatch.models import Interval, Overlap
from slotmatch.scheduler import intersect, intersect_sorted


def test_example_overlap() -> None:
    a = [Interval("Mon", 540, 600)]
    b = [Interval("Mon", 570, 630)]
    assert intersect(a, b) == [Overlap("Mon", 570, 600)]


def test_disjoint_days_give_nothing() -> None:
    a = [Interval("Mon", 0, 1440), Interval("Tue", 600, 700)]
    b = [Interval("Wed", 0, 1440), Interval("Sun", 600, 700)]
    assert intersect(a, b) == []
    assert intersect_sorted(a, b) == []


def test_touching_intervals_do_not_overlap() -> None:
    a = [Interval("Mon", 540, 600)]
    b = [Interval("Mon", 600, 660), Interval("Mon", 420, 540), Interval("Mon", 700, 800)]
    assert intersect(a, b) == []
    assert intersect(b, a) == []
    assert intersect_sorted(a, b) == []


def test_containment_and_order_follow_nested_loop() -> None:
    a = [Interval("Tue", 600, 720), Interval("Mon", 480, 1020)]
    b = [Interval("Mon", 900, 960), Interval("Tue", 660, 690), Interval("Mon", 500, 520)]
    assert intersect(a, b) == [
        Overlap("Tue", 660, 690),
        Overlap("Mon", 900, 960),
        Overlap("Mon", 500, 520),
    ]


def test_duplicates_are_kept() -> None:
    a = [Interval("Fri", 600, 700), Interval("Fri", 600, 700)]
    b = [Interval("Fri", 650, 800)]
    assert intersect(a, b) == [Overlap("Fri", 650, 700), Overlap("Fri", 650, 700)]


def test_ids_are_ignored() -> None:
    a = [Interval("Mon", 540, 600, id="x1")]
    b = [Interval("Mon", 540, 600, id="y2")]
    assert intersect(a, b) == [Overlap("Mon", 540, 600)]


def test_idempotent() -> None:
    a = [Interval("Mon", 540, 600), Interval("Wed", 60, 900)]
    b = [Interval("Wed", 30, 120), Interval("Mon", 500, 560), Interval("Wed", 800, 1000)]
    assert intersect(a, b) == intersect(a, b)
    assert intersect_sorted(a, b) == intersect_sorted(a, b)


def test_sorted_strategy_matches_nested() -> None:
    a = [
        Interval("Mon", 480, 720),
        Interval("Mon", 600, 900),
        Interval("Tue", 0, 1440),
        Interval("Thu", 300, 400),
    ]
    b = [
        Interval("Mon", 700, 800),
        Interval("Mon", 400, 500),
        Interval("Mon", 720, 730),
        Interval("Tue", 1000, 1100),
        Interval("Tue", 10, 20),
        Interval("Thu", 400, 500),
    ]
    nested = intersect(a, b)
    swept = intersect_sorted(a, b)
    assert Counter(nested) == Counter(swept)
    assert len(nested) == 6
    # within one A interval the sweep walks B by start
    assert swept[:2] == [Overlap("Mon", 480, 500), Overlap("Mon", 700, 720)]
