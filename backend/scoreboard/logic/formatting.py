"""Text formatting consumed by every scoreboard display."""

_MILLIS_PER_HOUR = 3_600_000
_MILLIS_PER_MINUTE = 60_000
_MILLIS_PER_SECOND = 1_000


def format_millis(millis: int) -> str:
    """
    Format a millisecond count as ``H:MM:SS.mmm``.

    Hours are not padded (and are not wrapped above 9); minutes and seconds
    use two digits, milliseconds three. Displays depend on this exact layout.
    """
    if millis < 0:
        raise ValueError(f"millis must be non-negative, got {millis}")
    hours = millis // _MILLIS_PER_HOUR
    minutes = (millis % _MILLIS_PER_HOUR) // _MILLIS_PER_MINUTE
    seconds = (millis % _MILLIS_PER_MINUTE) // _MILLIS_PER_SECOND
    milliseconds = millis % _MILLIS_PER_SECOND
    return f"{hours:01}:{minutes:02}:{seconds:02}.{milliseconds:03}"
