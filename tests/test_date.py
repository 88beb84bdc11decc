import pytest

from nebula4x.date import YMD, Date


def test_epoch_is_2200_01_01():
    d = Date.from_ymd(2200, 1, 1)
    assert d.days_since_epoch == 0
    assert str(d) == "2200-01-01"


def test_parse_end_of_year():
    ymd = Date.parse_iso_ymd("2200-12-31").to_ymd()
    assert ymd.year == 2200
    assert ymd.month == 12
    assert ymd.day == 31


def test_day_number_to_string():
    assert str(Date(10)) == "2200-01-11"
    assert str(Date(11)) == "2200-01-12"


def test_default_is_epoch():
    assert Date() == Date.from_ymd(2200, 1, 1)


def test_2200_is_not_a_leap_year():
    assert Date.from_ymd(2201, 1, 1).days_since_epoch == 365
    with pytest.raises(ValueError):
        Date.from_ymd(2200, 2, 29)


def test_negative_days_go_before_epoch():
    assert str(Date(-1)) == "2199-12-31"


@pytest.mark.parametrize("days", [-100000, -366, -1, 0, 1, 59, 60, 365, 1000, 146097, 500000])
def test_round_trip_through_string(days):
    d = Date(days)
    assert Date.parse_iso_ymd(str(d)) == d
    y, m, dd = d.to_ymd()
    assert Date.from_ymd(y, m, dd) == d


def test_add_days_and_ordering():
    d = Date.parse_iso_ymd("2200-12-31")
    nxt = d.add_days(1)
    assert str(nxt) == "2201-01-01"
    assert nxt > d
    assert nxt.add_days(-1) == d


def test_to_ymd_is_named_tuple():
    assert Date(0).to_ymd() == YMD(2200, 1, 1)


@pytest.mark.parametrize("text", ["", "2200/01/01", "2200-1-1", "2200-13-01", "2200-04-31", "hello"])
def test_parse_rejects_bad_input(text):
    with pytest.raises(ValueError):
        Date.parse_iso_ymd(text)