######################
# Tile: a map cell; knows only whether it blocks movement and sight
######################

class Tile:
	def __init__(self, blocked, block_sight=None):
		self.blocked = blocked

		#by default, tile blocks sight only if it blocks movement
		if block_sight is None: block_sight = blocked
		self.block_sight = block_sight

	@classmethod
	def ground(cls):
		return cls(False, False)

	@classmethod
	def wall(cls):
		return cls(True, True)

	def __eq__(self, other):
		if not isinstance(other, Tile):
			return NotImplemented
		return self.blocked == other.blocked and self.block_sight == other.block_sight

	def __repr__(self):
		return 'Tile(blocked=%r, block_sight=%r)' % (self.blocked, self.block_sight)
