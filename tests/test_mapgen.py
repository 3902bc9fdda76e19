import pytest

from ruin.constants import MAP_WIDTH, MAP_HEIGHT
from ruin.mapgen import GameMap, MapBoundsError, Rect, create_h_tunnel, create_room, create_v_tunnel, make_map
from ruin.tiles import Tile


def _carved_cells():
	cells = set()
	for x1, x2 in ((21, 30), (51, 60)):
		for x in range(x1, x2):
			for y in range(16, 30):
				cells.add((x, y))
	for x in range(25, 56):
		cells.add((x, 23))
	return cells


def _snapshot(game_map):
	return [[(t.blocked, t.block_sight) for t in column] for column in game_map.tiles]


def test_tile_variants():
	assert Tile.ground() == Tile(False, False)
	assert Tile.wall() == Tile(True, True)
	# sight follows movement unless told otherwise
	assert Tile(True).block_sight is True
	assert Tile(True, False).block_sight is False


def test_rect_from_origin_and_size():
	room = Rect(20, 15, 10, 15)
	assert (room.x1, room.y1, room.x2, room.y2) == (20, 15, 30, 30)


def test_fresh_map_is_all_wall():
	game_map = GameMap(5, 4)
	assert all(game_map[x][y] == Tile.wall() for x in range(5) for y in range(4))


def test_generated_map_only_rooms_and_tunnel_are_open(game_map):
	carved = _carved_cells()
	assert (game_map.width, game_map.height) == (MAP_WIDTH, MAP_HEIGHT)
	for x in range(game_map.width):
		for y in range(game_map.height):
			tile = game_map[x][y]
			expected = (x, y) not in carved
			assert tile.blocked is expected, (x, y)
			assert tile.block_sight is expected, (x, y)


def test_room_border_stays_wall(game_map):
	# outer ring of the first room
	assert game_map.is_blocked(20, 20)
	assert game_map.is_blocked(30, 20)
	assert game_map.is_blocked(25, 15)
	assert game_map.is_blocked(25, 30)
	assert not game_map.is_blocked(21, 16)
	assert not game_map.is_blocked(29, 29)


def test_carving_a_room_twice_is_the_same_as_once():
	once = GameMap(20, 20)
	twice = GameMap(20, 20)
	room = Rect(2, 3, 6, 5)
	create_room(room, once)
	create_room(room, twice)
	create_room(room, twice)
	assert _snapshot(once) == _snapshot(twice)


@pytest.mark.parametrize("x1,x2", [(3, 8), (8, 3)])
def test_h_tunnel_direction_does_not_matter(x1, x2):
	game_map = GameMap(10, 10)
	create_h_tunnel(x1, x2, 4, game_map)
	open_cells = {(x, y) for x in range(10) for y in range(10) if not game_map.is_blocked(x, y)}
	assert open_cells == {(x, 4) for x in range(3, 9)}


@pytest.mark.parametrize("y1,y2", [(1, 6), (6, 1)])
def test_v_tunnel_direction_does_not_matter(y1, y2):
	game_map = GameMap(10, 10)
	create_v_tunnel(y1, y2, 7, game_map)
	open_cells = {(x, y) for x in range(10) for y in range(10) if not game_map.is_blocked(x, y)}
	assert open_cells == {(7, y) for y in range(1, 7)}


def test_room_outside_map_raises_without_carving():
	game_map = GameMap(10, 10)
	before = _snapshot(game_map)
	with pytest.raises(MapBoundsError):
		create_room(Rect(5, 5, 10, 3), game_map)
	assert _snapshot(game_map) == before


@pytest.mark.parametrize(
	"carve",
	[
		lambda m: create_h_tunnel(-1, 4, 2, m),
		lambda m: create_h_tunnel(0, 10, 2, m),
		lambda m: create_h_tunnel(0, 4, 10, m),
		lambda m: create_v_tunnel(0, 10, 2, m),
		lambda m: create_v_tunnel(0, 4, -1, m),
	],
)
def test_tunnel_outside_map_raises(carve):
	game_map = GameMap(10, 10)
	with pytest.raises(MapBoundsError):
		carve(game_map)
	assert all(game_map.is_blocked(x, y) for x in range(10) for y in range(10))


def test_map_bounds_error_is_value_error():
	assert issubclass(MapBoundsError, ValueError)


def test_out_of_bounds_counts_as_blocked():
	game_map = GameMap(3, 3)
	create_room(Rect(-1, -1, 4, 4), game_map)  # interior is the whole 3x3 map
	assert not game_map.is_blocked(0, 0)
	assert game_map.is_blocked(-1, 0)
	assert game_map.is_blocked(0, 3)
	assert game_map.is_blocked(3, 2)


def test_make_map_accepts_larger_grids():
	game_map = make_map(100, 60)
	assert (game_map.width, game_map.height) == (100, 60)
	assert not game_map.is_blocked(25, 23)


def test_make_map_rejects_grid_too_small_for_rooms():
	with pytest.raises(MapBoundsError):
		make_map(40, 45)


def test_non_positive_dimensions_rejected():
	with pytest.raises(ValueError):
		GameMap(0, 5)
