"""Elapsed time formatting"""


def format_elapsed(seconds: float) -> str:
    """Render a duration the way build tools usually print it.

    Examples:
        0.000012 → "12 μs"
        0.4567   → "457 ms"
        1.234    → "1.23 s"
        125.0    → "2 m 5 s"
    """
    if seconds < 0:
        seconds = 0.0
    if seconds < 0.001:
        return f"{seconds * 1_000_000:.0f} μs"
    if seconds < 1:
        return f"{seconds * 1000:.0f} ms"
    if seconds < 60:
        return f"{seconds:.2f} s"
    minutes, rest = divmod(int(round(seconds)), 60)
    return f"{minutes} m {rest} s"
