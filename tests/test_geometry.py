import random

import pytest

from roots.geometry import Direction, Position, TurnDirection, step_position

ALL_DIRECTIONS = list(Direction)


class TestTurning:
    @pytest.mark.parametrize("direction", ALL_DIRECTIONS)
    def test_right_then_left_is_identity(self, direction: Direction) -> None:
        assert direction.turn(TurnDirection.RIGHT).turn(TurnDirection.LEFT) == direction
        assert direction.turn(TurnDirection.LEFT).turn(TurnDirection.RIGHT) == direction

    @pytest.mark.parametrize("turning", list(TurnDirection))
    @pytest.mark.parametrize("direction", ALL_DIRECTIONS)
    def test_eight_turns_return_to_start(self, direction: Direction, turning: TurnDirection) -> None:
        current = direction
        for _ in range(8):
            current = current.turn(turning)
        assert current == direction

    def test_left_is_counter_clockwise(self) -> None:
        assert Direction.NORTH.turn(TurnDirection.LEFT) == Direction.NORTH_WEST
        assert Direction.NORTH_WEST.turn(TurnDirection.LEFT) == Direction.WEST
        assert Direction.EAST.turn(TurnDirection.LEFT) == Direction.NORTH_EAST

    def test_right_is_clockwise(self) -> None:
        assert Direction.NORTH.turn(TurnDirection.RIGHT) == Direction.NORTH_EAST
        assert Direction.SOUTH.turn(TurnDirection.RIGHT) == Direction.SOUTH_WEST
        assert Direction.WEST.turn(TurnDirection.RIGHT) == Direction.NORTH_WEST


class TestPredicates:
    def test_counts(self) -> None:
        assert sum(d.is_moving_north for d in ALL_DIRECTIONS) == 3
        assert sum(d.is_moving_west for d in ALL_DIRECTIONS) == 2
        assert sum(d.is_moving_east for d in ALL_DIRECTIONS) == 2
        assert sum(d.is_moving_horizontally for d in ALL_DIRECTIONS) == 2

    def test_members(self) -> None:
        assert {d for d in ALL_DIRECTIONS if d.is_moving_north} == {
            Direction.NORTH,
            Direction.NORTH_EAST,
            Direction.NORTH_WEST,
        }
        assert {d for d in ALL_DIRECTIONS if d.is_moving_west} == {Direction.WEST, Direction.NORTH_WEST}
        assert {d for d in ALL_DIRECTIONS if d.is_moving_east} == {Direction.EAST, Direction.NORTH_EAST}
        assert {d for d in ALL_DIRECTIONS if d.is_moving_horizontally} == {Direction.EAST, Direction.WEST}


class TestStepPosition:
    def test_moves_one_cell(self) -> None:
        origin = Position(5, 5)
        assert step_position(origin, Direction.NORTH, 10, 10) == Position(5, 6)
        assert step_position(origin, Direction.SOUTH_WEST, 10, 10) == Position(4, 4)
        assert step_position(origin, Direction.SOUTH, 10, 10) == Position(5, 4)
        assert step_position(origin, Direction.EAST, 10, 10) == Position(6, 5)

    @pytest.mark.parametrize(
        "position, direction",
        [
            (Position(0, 0), Direction.WEST),
            (Position(0, 0), Direction.SOUTH),
            (Position(0, 0), Direction.SOUTH_EAST),
            (Position(9, 3), Direction.EAST),
            (Position(3, 9), Direction.NORTH_WEST),
            (Position(9, 9), Direction.NORTH_EAST),
        ],
    )
    def test_edges_block_the_move(self, position: Position, direction: Direction) -> None:
        assert step_position(position, direction, 10, 10) is None

    @pytest.mark.parametrize("width, height", [(1, 1), (1, 7), (7, 1), (2, 3), (20, 20)])
    def test_random_walks_stay_in_bounds(self, width: int, height: int) -> None:
        rng = random.Random(width * 31 + height)
        position = Position(width // 2, 0)
        for _ in range(2000):
            moved = step_position(position, rng.choice(ALL_DIRECTIONS), width, height)
            if moved is not None:
                position = moved
            assert 0 <= position.x < width
            assert 0 <= position.y < height
