"""
Repeated literal matching over bytes.

`match` is the only primitive the request line parser needs: it matches a
fixed literal a required number of times, then as many more times as
allowed. Every step is checked against the end of the input, so the cursor
never moves past `len(data)`.
"""

__all__ = ["match", "UNBOUNDED"]

UNBOUNDED = -1


def _step(literal, negate, data, pos):
    """
    Try one repetition at `pos`.
    Returns the next cursor, or None if the step does not apply. A literal
    that would run past the end of `data` never applies, negated or not.
    """
    end = pos + len(literal)
    if end > len(data):
        return None
    if (data[pos:end] == literal) != negate:
        return end
    return None


def match(literal, at_least, maybe_more, negate, data, pos=0):
    """
    Match `literal` at least `at_least` times starting at `pos`, then up to
    `maybe_more` more times (no limit if `maybe_more` is negative).
    With `negate`, a step succeeds where the literal does NOT occur.

    Returns the cursor after the last repetition, or None when one of the
    required repetitions fails.
    """
    if not literal:
        raise ValueError("literal must be non-empty")

    for _ in range(at_least):
        pos = _step(literal, negate, data, pos)
        if pos is None:
            return None

    while maybe_more != 0:
        next_pos = _step(literal, negate, data, pos)
        if next_pos is None:
            break
        pos = next_pos
        if maybe_more > 0:
            maybe_more -= 1

    return pos
