import pytest

from slotmatch.errors import InvalidInterval, UnknownSide
from slotmatch.models import Interval, Roster, minutes, time_from_minutes


def test_minutes_round_trip_examples() -> None:
    assert minutes("09:00") == 540
    assert minutes("9:30") == 570
    assert minutes("00:00") == 0
    assert minutes("24:00") == 1440
    assert time_from_minutes(570) == "09:30"
    assert time_from_minutes(5) == "00:05"
    assert time_from_minutes(1440) == "24:00"


@pytest.mark.parametrize(
    "text", ["", "9", "09:5", "09:60", "25:00", "24:01", "ab:cd", "-1:00", "0²:00", "09:¹²", "١٢:٠٠"]
)
def test_minutes_rejects_garbage(text: str) -> None:
    with pytest.raises(InvalidInterval):
        minutes(text)


def test_interval_equality_ignores_id() -> None:
    assert Interval("Mon", 0, 30, id="a") == Interval("Mon", 0, 30, id="b")
    assert Interval("Mon", 0, 30).duration == 30


def test_roster_add_assigns_id_and_validates() -> None:
    roster = Roster()
    added = roster.add("you", Interval("Mon", 540, 600))
    assert added.id and len(added.id) == 8
    assert roster.you == [added]
    with pytest.raises(InvalidInterval):
        roster.add("you", Interval("Mon", 600, 600))
    with pytest.raises(InvalidInterval):
        roster.add("them", Interval("Mon", 600, 1441))
    assert roster.counts() == {"you": 1, "them": 0}


def test_roster_remove_and_clear() -> None:
    roster = Roster()
    keep = roster.add("them", Interval("Tue", 60, 120, id="keep"))
    roster.add("them", Interval("Tue", 60, 120, id="drop"))
    assert roster.remove("them", "drop") is True
    assert roster.remove("them", "drop") is False
    assert roster.them == [keep] and roster.them[0].id == "keep"
    roster.add("you", Interval("Wed", 0, 10))
    roster.clear()
    assert roster.counts() == {"you": 0, "them": 0}


def test_unknown_side() -> None:
    roster = Roster()
    with pytest.raises(UnknownSide):
        roster.add("us", Interval("Mon", 0, 30))
    with pytest.raises(UnknownSide):
        roster.label("everyone")
    assert roster.label("them") == "GPT"
