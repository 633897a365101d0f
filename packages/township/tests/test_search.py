"""
Test suite for bounded breadth-first tile search.

Tests cover:
- Start parcel matching
- Zero distance cutoff
- Exhaustive search without a match
- FIFO discovery order and west/east/north/south tie-breaks
- Distance filtering (skipped parcels are never tested)
- Invalid start coordinates
- City delegation
"""

from township import BuildingType, City, Grid, find_tile


def at(*coords):
    wanted = set(coords)
    return lambda parcel: (parcel.x, parcel.y) in wanted


class TestFindTileBasics:
    def test_start_parcel_matches_itself(self):
        grid = Grid(5)
        result = find_tile(grid, (2, 2), lambda p: True, 3)
        assert (result.x, result.y) == (2, 2)

    def test_zero_distance_only_matches_start(self):
        grid = Grid(5)
        assert find_tile(grid, (0, 0), at((1, 0), (0, 1)), 0) is None
        result = find_tile(grid, (0, 0), at((0, 0)), 0)
        assert (result.x, result.y) == (0, 0)

    def test_no_match_returns_none_after_visiting_everything(self):
        grid = Grid(5)
        tested = []

        def never(parcel):
            tested.append((parcel.x, parcel.y))
            return False

        assert find_tile(grid, (0, 0), never, 100) is None
        assert len(tested) == 25
        assert len(set(tested)) == 25

    def test_out_of_bounds_start_returns_none(self):
        grid = Grid(3)
        assert find_tile(grid, (5, 5), lambda p: True, 10) is None
        assert find_tile(grid, (-1, 0), lambda p: True, 10) is None


class TestFindTileOrder:
    def test_west_wins_over_east(self):
        grid = Grid(5)
        result = find_tile(grid, (2, 2), at((1, 2), (3, 2)), 1)
        assert (result.x, result.y) == (1, 2)

    def test_east_wins_over_north(self):
        grid = Grid(5)
        result = find_tile(grid, (2, 2), at((2, 1), (3, 2)), 1)
        assert (result.x, result.y) == (3, 2)

    def test_north_wins_over_south(self):
        grid = Grid(5)
        result = find_tile(grid, (2, 2), at((2, 3), (2, 1)), 1)
        assert (result.x, result.y) == (2, 1)

    def test_predicate_sees_parcels_in_discovery_order(self):
        grid = Grid(5)
        tested = []

        def record(parcel):
            tested.append((parcel.x, parcel.y))
            return False

        find_tile(grid, (2, 2), record, 1)
        assert tested == [(2, 2), (1, 2), (3, 2), (2, 1), (2, 3)]

    def test_nearer_layer_is_tested_first(self):
        grid = Grid(6)
        result = find_tile(grid, (0, 0), at((0, 1), (5, 5)), 20)
        assert (result.x, result.y) == (0, 1)


class TestFindTileDistance:
    def test_match_beyond_cutoff_is_ignored(self):
        grid = Grid(6)
        assert find_tile(grid, (0, 0), at((3, 0)), 2) is None
        result = find_tile(grid, (0, 0), at((3, 0)), 3)
        assert (result.x, result.y) == (3, 0)

    def test_parcels_beyond_cutoff_are_never_tested(self):
        grid = Grid(6)
        tested = []

        def record(parcel):
            tested.append(parcel)
            return False

        find_tile(grid, (3, 3), record, 2)
        starts = grid.get(3, 3)
        assert tested
        assert all(starts.distance_to(p) <= 2 for p in tested)
        assert len(tested) == 13


class TestCityFindTile:
    def test_finds_nearest_road(self):
        city = City(6, 10_000, seed=0)
        city.place_building(4, 0, BuildingType.ROAD)
        city.place_building(0, 2, BuildingType.ROAD)

        def is_road(parcel):
            return parcel.building is not None and parcel.building.type == BuildingType.ROAD

        result = city.find_tile((0, 0), is_road, 5)
        assert (result.x, result.y) == (0, 2)

    def test_neighbors_delegate_to_grid(self):
        city = City(3, 0, seed=0)
        assert [(p.x, p.y) for p in city.neighbors(1, 1)] == [(0, 1), (2, 1), (1, 0), (1, 2)]
