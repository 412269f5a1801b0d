"""Frame and tick rate measurement."""

from __future__ import annotations


def format_rate(label: str, value: float) -> str:
    """Format a rate as '<label>: <integer>.<two digits>'.

    A place value is written only when the remaining integer part reaches it,
    so zeros inside numbers of three or more digits are dropped.
    """
    integer = int(value)
    fraction = int((value - integer) * 100)
    digits = []
    for place in (1000, 100, 10):
        if integer >= place:
            digits.append(chr(ord("0") + integer // place))
            integer %= place
    digits.append(chr(ord("0") + integer % 10))
    tens, ones = divmod(fraction, 10)
    return f"{label}: {''.join(digits)}.{chr(ord('0') + tens)}{chr(ord('0') + ones)}"


class RateCounter:
    """Measures events per second from the time between consecutive events."""

    def __init__(self, label: str, now: float) -> None:
        self.label = label
        self.last_time = now
        self.rate = 0.0
        self.text = format_rate(label, self.rate)

    def tick(self, now: float) -> float:
        """Record an event at time now and return the updated rate."""
        elapsed = self.elapsed(now)
        if elapsed > 0:
            self.rate = 1.0 / elapsed
        self.last_time = now
        self.text = format_rate(self.label, self.rate)
        return self.rate

    def reset(self, now: float) -> None:
        """Restart timing from now."""
        self.last_time = now

    def elapsed(self, now: float) -> float:
        """Seconds since the last event."""
        return now - self.last_time