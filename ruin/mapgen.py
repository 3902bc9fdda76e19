import logging

from .constants import MAP_WIDTH, MAP_HEIGHT, ROOM_1, ROOM_2, TUNNEL_X1, TUNNEL_X2, TUNNEL_Y
from .tiles import Tile

logger = logging.getLogger(__name__)


class MapBoundsError(ValueError):
	"""Raised when a carve would touch a cell outside the map."""


######################
# Rect: a rectangular region of the map
######################

class Rect:
	def __init__(self, x, y, w, h):
		self.x1 = x
		self.y1 = y
		self.x2 = x + w
		self.y2 = y + h

	def __repr__(self):
		return 'Rect(x1=%d, y1=%d, x2=%d, y2=%d)' % (self.x1, self.y1, self.x2, self.y2)


######################
# GameMap: fixed-size grid of tiles, indexed [x][y]
######################

class GameMap:
	def __init__(self, width, height):
		if width <= 0 or height <= 0:
			raise ValueError('map dimensions must be positive, got %dx%d' % (width, height))
		self.width = width
		self.height = height

		#default = solid wall everywhere, rooms get carved out of it
		self.tiles = [[ Tile.wall()
			for y in range(height) ]
				for x in range(width) ]

	def __getitem__(self, x):
		return self.tiles[x]

	def in_bounds(self, x, y):
		return 0 <= x < self.width and 0 <= y < self.height

	#anything off the map counts as blocked
	def is_blocked(self, x, y):
		if not self.in_bounds(x, y):
			return True
		return self.tiles[x][y].blocked

	def carve(self, x, y):
		self.tiles[x][y] = Tile.ground()

	def check_bounds(self, x1, y1, x2, y2, what):
		if not (self.in_bounds(x1, y1) and self.in_bounds(x2, y2)):
			raise MapBoundsError('%s spans (%d, %d)-(%d, %d), outside %dx%d map'
				% (what, x1, y1, x2, y2, self.width, self.height))


################
# Mapgen functions
################

#carve the interior of a room, leaving its outer edge as wall
def create_room(room, game_map):
	#empty interior (1-wide room): nothing to carve, nothing to check
	if room.x2 - room.x1 < 2 or room.y2 - room.y1 < 2:
		return
	game_map.check_bounds(room.x1 + 1, room.y1 + 1, room.x2 - 1, room.y2 - 1, 'room %r' % (room,))
	for x in range(room.x1 + 1, room.x2):
		for y in range(room.y1 + 1, room.y2):
			game_map.carve(x, y)
	logger.debug('Carved room %r', room)

def create_h_tunnel(x1, x2, y, game_map):
	game_map.check_bounds(min(x1, x2), y, max(x1, x2), y, 'horizontal tunnel')
	for x in range(min(x1, x2), max(x1, x2) + 1):
		game_map.carve(x, y)
	logger.debug('Carved horizontal tunnel x=%d..%d at y=%d', min(x1, x2), max(x1, x2), y)

def create_v_tunnel(y1, y2, x, game_map):
	game_map.check_bounds(x, min(y1, y2), x, max(y1, y2), 'vertical tunnel')
	for y in range(min(y1, y2), max(y1, y2) + 1):
		game_map.carve(x, y)
	logger.debug('Carved vertical tunnel y=%d..%d at x=%d', min(y1, y2), max(y1, y2), x)


############################
# make_map(): creates the map, two fixed rooms joined by a tunnel
############################

def make_map(width=MAP_WIDTH, height=MAP_HEIGHT):
	game_map = GameMap(width, height)

	rooms = [Rect(*ROOM_1), Rect(*ROOM_2)]
	for room in rooms:
		create_room(room, game_map)

	create_h_tunnel(TUNNEL_X1, TUNNEL_X2, TUNNEL_Y, game_map)

	logger.info('Generated %dx%d map with %d rooms', width, height, len(rooms))
	return game_map
