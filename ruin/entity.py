import logging

logger = logging.getLogger(__name__)


##############
# Entity: movable thing with a character representing it on the map
##############

class Entity:
	def __init__(self, x, y, char, color, name=None):
		if len(char) != 1:
			raise ValueError('entity glyph must be a single character, got %r' % (char,))
		self.x = x
		self.y = y
		self.char = char
		self.color = color
		self.name = name or char

	#move by the given amount, returning True if it worked.
	#with a map the destination must not be blocked; without one the move always happens.
	def move(self, dx, dy, game_map=None):
		if game_map is not None and game_map.is_blocked(self.x + dx, self.y + dy):
			logger.debug('%s blocked moving from (%d, %d) by (%d, %d)', self.name, self.x, self.y, dx, dy)
			return False
		self.x += dx
		self.y += dy
		return True

	@property
	def position(self):
		return (self.x, self.y)

	#cells off the console are skipped, like libtcod put_char does
	def on_console(self, con):
		return 0 <= self.x < con.width and 0 <= self.y < con.height

	def draw(self, con):
		#foreground and glyph only, the background belongs to the map
		if not self.on_console(con):
			return
		con.fg[self.x, self.y] = self.color
		con.ch[self.x, self.y] = ord(self.char)

	def clear(self, con):
		#erase this entity from the console
		if not self.on_console(con):
			return
		con.ch[self.x, self.y] = ord(' ')

	def __repr__(self):
		return 'Entity(%r, x=%d, y=%d)' % (self.name, self.x, self.y)
