"""Bit-vector encoding of juggling states.

A state is a non-negative int. Bit p (1-indexed) set means a ball is
scheduled to land p beats from now. Bit 0 ("now") is never stored, so
the root state for 3 balls is 0b1110.
"""


def _check_position(position: int) -> None:
    if position < 1:
        raise ValueError(f"state positions start at 1, got {position}")


def is_set(state: int, position: int) -> bool:
    """Check whether a ball is scheduled to land at ``position``."""
    _check_position(position)
    return bool(state & (1 << position))


def set_position(state: int, position: int) -> int:
    """Return ``state`` with ``position`` occupied."""
    _check_position(position)
    return state | (1 << position)


def clear_position(state: int, position: int) -> int:
    """Return ``state`` with ``position`` free."""
    _check_position(position)
    return state & ~(1 << position)


def root_state(balls: int) -> int:
    """The ready state: positions 1..balls occupied, everything above free."""
    state = 0
    for position in range(1, balls + 1):
        state = set_position(state, position)
    return state


def shift_left(state: int, max_height: int) -> int:
    """Advance time by one beat.

    Drops position 1 and moves every other occupied position down by one.
    Positions above ``max_height`` are ignored.

    Example (max_height=5): 0xxx0 -> xxx00, xx000 -> x0000
    """
    shifted = 0
    for position in range(2, max_height + 1):
        if is_set(state, position):
            shifted = set_position(shifted, position - 1)
    return shifted


def format_state(state: int, max_height: int) -> str:
    """Render a state as ``x``/``0`` per beat, nearest beat first."""
    return "".join(
        "x" if is_set(state, position) else "0"
        for position in range(1, max_height + 1)
    )
