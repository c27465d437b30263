"""Tests for coordinates, direction tables and algebraic notation."""

import pytest

from territory.errors import InvalidSquareError
from territory.geometry import (
    KING_STEPS,
    KNIGHT_JUMPS,
    Coordinates,
    all_squares,
    jump_targets,
    parse_square,
    square_name,
    walk_ray,
)


class TestCoordinates:
    def test_in_bounds(self):
        assert Coordinates(0, 0).in_bounds
        assert Coordinates(7, 7).in_bounds

    @pytest.mark.parametrize("file,rank", [(-1, 3), (8, 0), (3, -1), (0, 8)])
    def test_off_board_is_representable(self, file, rank):
        coords = Coordinates(file, rank)
        assert coords.in_bounds is False
        assert (coords.file, coords.rank) == (file, rank)  # not clamped

    def test_offset(self):
        assert Coordinates(4, 3).offset(1, -2) == Coordinates(5, 1)
        assert Coordinates(7, 7).offset(1, 0) == Coordinates(8, 7)

    def test_name_and_parse(self):
        assert Coordinates(4, 3).name == "e4"
        assert Coordinates.parse("h8") == Coordinates(7, 7)
        assert str(Coordinates(0, 0)) == "a1"

    def test_str_off_board(self):
        assert str(Coordinates(-1, 2)) == "(-1, 2)"


class TestNotation:
    def test_corners(self):
        assert square_name(Coordinates(0, 0)) == "a1"
        assert square_name(Coordinates(7, 0)) == "h1"
        assert square_name(Coordinates(0, 7)) == "a8"
        assert parse_square("e4") == Coordinates(4, 3)

    def test_round_trip_every_square(self):
        names = [f + r for f in "abcdefgh" for r in "12345678"]
        assert {square_name(parse_square(n)) for n in names} == set(names)
        for name in names:
            assert square_name(parse_square(name)) == name

    def test_injective(self):
        names = [square_name(sq) for sq in all_squares()]
        assert len(set(names)) == 64

    @pytest.mark.parametrize("text", ["", "e", "e9", "i1", "E4", "e44", "4e", "e0", " e4"])
    def test_malformed_rejected(self, text):
        with pytest.raises(InvalidSquareError):
            parse_square(text)

    def test_non_string_rejected(self):
        with pytest.raises(InvalidSquareError):
            parse_square(None)

    def test_invalid_square_is_value_error(self):
        with pytest.raises(ValueError):
            parse_square("z9")

    def test_off_board_has_no_name(self):
        with pytest.raises(InvalidSquareError):
            square_name(Coordinates(8, 0))


class TestWalkers:
    def test_all_squares_scan_order(self):
        squares = list(all_squares())
        assert len(squares) == 64
        assert squares[0] == Coordinates(0, 0)
        assert squares[1] == Coordinates(1, 0)
        assert squares[8] == Coordinates(0, 1)
        assert squares[-1] == Coordinates(7, 7)

    def test_walk_ray_to_edge(self):
        ray = list(walk_ray(Coordinates(0, 0), (1, 1)))
        assert [sq.name for sq in ray] == ["b2", "c3", "d4", "e5", "f6", "g7", "h8"]

    def test_walk_ray_from_edge_is_empty(self):
        assert list(walk_ray(Coordinates(7, 3), (1, 0))) == []

    def test_knight_in_corner(self):
        assert [sq.name for sq in jump_targets(Coordinates(0, 0), KNIGHT_JUMPS)] == ["b3", "c2"]

    def test_king_in_center(self):
        assert len(list(jump_targets(Coordinates(3, 3), KING_STEPS))) == 8

    def test_tables_have_eight_entries(self):
        assert len(KNIGHT_JUMPS) == 8
        assert len(KING_STEPS) == 8
