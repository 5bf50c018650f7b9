"""Tests for the bit-vector state encoding."""

import pytest

from siteswap.graph.states import (
    clear_position,
    format_state,
    is_set,
    root_state,
    set_position,
    shift_left,
)


class TestPositions:
    """Setting, clearing and testing positions."""

    def test_root_state_bits(self) -> None:
        # positions 1..3 -> 0b1110
        assert root_state(3) == 0b1110

    def test_is_set(self) -> None:
        state = root_state(2)
        assert is_set(state, 1)
        assert is_set(state, 2)
        assert not is_set(state, 3)

    def test_set_is_idempotent(self) -> None:
        state = set_position(0, 4)
        assert set_position(state, 4) == state

    def test_clear(self) -> None:
        assert clear_position(root_state(3), 2) == 0b1010
        assert clear_position(0, 2) == 0

    def test_position_zero_rejected(self) -> None:
        with pytest.raises(ValueError, match="positions start at 1"):
            is_set(0b10, 0)


class TestShiftLeft:
    """Advancing time by one beat."""

    def test_drops_landing_ball(self) -> None:
        # xx000 -> x0000
        assert shift_left(0b110, 5) == 0b10

    def test_moves_balls_down(self) -> None:
        # 0xxx0 -> xxx00
        assert shift_left(0b11100, 5) == 0b1110

    def test_ignores_positions_above_max_height(self) -> None:
        assert shift_left(1 << 6, 5) == 0

    def test_empty_state(self) -> None:
        assert shift_left(0, 5) == 0


class TestFormatState:
    """Rendering states as x/0 strings."""

    def test_root(self) -> None:
        assert format_state(root_state(3), 5) == "xxx00"

    def test_gap(self) -> None:
        assert format_state(0b10110, 5) == "xx0x0"

    def test_width_is_max_height(self) -> None:
        assert len(format_state(0, 7)) == 7
