import pytest

from tiny_towns.core.engine.board import empty_board
from tiny_towns.core.engine.config import RulesConfig
from tiny_towns.core.engine.rules import buildable, find_match, find_matches
from tiny_towns.core.engine.types import (
    Building,
    Cube,
    PlacementError,
    Resource,
    Structure,
    TinyTownsError,
)


def _place_theater(board):
    #    St
    # Wd Gs Wd
    board.place_stone(0, 1)
    board.place_wood(1, 0)
    board.place_glass(1, 1)
    board.place_wood(1, 2)


def test_empty_board_has_no_matches(board):
    for building in Building:
        assert find_matches(board, building) == []
    assert buildable(board) == {}


def test_well_match_horizontal(board):
    board.place_wood(0, 0)
    board.place_stone(0, 1)
    matches = find_matches(board, Building.WELL)
    assert len(matches) == 1
    assert matches[0].origin == (0, 0)
    assert matches[0].cells() == ((0, 0), (0, 1))


def test_well_match_vertical_and_mirrored(board):
    board.place_stone(1, 2)
    board.place_wood(2, 2)
    match = find_match(board, Building.WELL, 2, 2)
    assert match is not None
    assert set(match.cells()) == {(1, 2), (2, 2)}


def test_wrong_resources_do_not_match(board):
    board.place_wood(0, 0)
    board.place_brick(0, 1)
    assert find_matches(board, Building.WELL) == []


def test_structures_do_not_count_as_cubes(board):
    board.place_wood(0, 0)
    board.place_building(0, 1, Building.WELL)
    assert find_matches(board, Building.WELL) == []


def test_theater_match_as_printed(board):
    _place_theater(board)
    match = find_match(board, Building.THEATER, 1, 1)
    assert match is not None
    assert match.origin == (0, 0)
    assert match.requirements[0] == ((0, 1), Cube(Resource.STONE))


def test_theater_match_rotated(board):
    # theater turned on its side
    board.place_wood(0, 1)
    board.place_stone(1, 0)
    board.place_glass(1, 1)
    board.place_wood(2, 1)
    match = find_match(board, Building.THEATER, 1, 0)
    assert match is not None
    assert set(match.cells()) == {(0, 1), (1, 0), (1, 1), (2, 1)}


def test_find_match_requires_coord_in_pattern(board):
    _place_theater(board)
    board.place_wheat(3, 3)
    assert find_match(board, Building.THEATER, 0, 0) is None
    assert find_match(board, Building.THEATER, 3, 3) is None


def test_find_match_rejects_out_of_bounds(board):
    with pytest.raises(PlacementError) as excinfo:
        find_match(board, Building.WELL, 4, 0)
    assert excinfo.value.error == TinyTownsError.OUT_OF_BOUNDS


def test_mirrored_trading_post_needs_mirrors():
    # .. Wd St
    # Bk Wd St
    layout = [
        ((0, 1), Resource.WOOD),
        ((0, 2), Resource.STONE),
        ((1, 0), Resource.BRICK),
        ((1, 1), Resource.WOOD),
        ((1, 2), Resource.STONE),
    ]
    mirrored = empty_board()
    strict = empty_board(RulesConfig(allow_mirrors=False))
    for board in (mirrored, strict):
        for (x, y), resource in layout:
            board.place_piece(x, y, resource)

    assert mirrored.check_building(1, 0, Building.TRADING_POST) is not None
    assert strict.check_building(1, 0, Building.TRADING_POST) is None


def test_buildable_groups_matches_by_building(board):
    _place_theater(board)
    board.place_stone(2, 0)
    available = buildable(board)
    # Wd at 1,0 over St at 2,0 is a vertical well
    assert set(available) == {Building.WELL, Building.THEATER}
    assert len(available[Building.THEATER]) == 1


def test_check_building_does_not_mutate(board):
    _place_theater(board)
    before = list(board.cells)
    assert board.check_building(1, 2, Building.THEATER) is not None
    assert board.check_building(3, 3, Building.THEATER) is None
    assert board.cells == before


def test_construct_building_clears_matched_cubes(board):
    _place_theater(board)
    board.place_brick(3, 3)
    match = board.construct_building(1, 1, Building.THEATER)
    assert match.building == Building.THEATER
    assert board.get_piece(1, 1) == Structure(Building.THEATER)
    for coord in [(0, 1), (1, 0), (1, 2)]:
        assert board.get_piece(*coord) is None
    assert board.get_piece(3, 3) == Cube(Resource.BRICK)


def test_construct_building_without_match_leaves_board(board):
    board.place_wood(0, 0)
    before = list(board.cells)
    with pytest.raises(PlacementError) as excinfo:
        board.construct_building(0, 0, Building.WELL)
    assert excinfo.value.error == TinyTownsError.PATTERN_MISMATCH
    assert excinfo.value.coord == (0, 0)
    assert board.cells == before


def test_construct_building_out_of_bounds(board):
    with pytest.raises(PlacementError) as excinfo:
        board.construct_building(0, 4, Building.WELL)
    assert excinfo.value.error == TinyTownsError.OUT_OF_BOUNDS
