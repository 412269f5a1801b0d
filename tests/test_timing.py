import pytest

from sidescroll.timing import RateCounter, format_rate


def test_format_rate_two_digit():
    assert format_rate("FPS", 60.0) == "FPS: 60.00"


def test_format_rate_below_one():
    assert format_rate("TPS", 0.5) == "TPS: 0.50"


def test_format_rate_four_digits():
    assert format_rate("FPS", 1234.5) == "FPS: 1234.50"


@pytest.mark.parametrize("value", [0.0, 3.25, 59.99, 812.75, 4321.5])
def test_format_rate_shape(value):
    text = format_rate("TPS", value)
    prefix, number = text.split(": ")
    whole, frac = number.split(".")
    assert prefix == "TPS"
    assert len(frac) == 2 and frac.isdigit()
    assert whole.isdigit()


def test_format_rate_whole_part_round_trips_without_inner_zeros():
    for value in (1, 7, 12, 99, 123, 987, 1234, 9876):
        whole = format_rate("FPS", float(value)).split(": ")[1].split(".")[0]
        assert int(whole) == value


def test_counter_tick_sets_rate_and_text():
    counter = RateCounter("FPS", 10.0)
    rate = counter.tick(10.25)
    assert rate * 0.25 == pytest.approx(1.0)
    assert counter.rate == rate
    assert counter.text == format_rate("FPS", rate)
    assert counter.last_time == 10.25


def test_counter_zero_elapsed_keeps_rate():
    counter = RateCounter("TPS", 1.0)
    first = counter.tick(1.5)
    assert counter.tick(1.5) == first


def test_counter_elapsed_and_reset():
    counter = RateCounter("TPS", 2.0)
    assert counter.elapsed(2.5) == pytest.approx(0.5)
    counter.reset(3.0)
    assert counter.elapsed(3.0) == 0
    assert counter.rate == 0.0