import logging

import tcod.event

logger = logging.getLogger(__name__)

KeySym = tcod.event.KeySym

#unit step for each arrow key, one axis at a time
MOVE_KEYS = {
	KeySym.UP: (0, -1),
	KeySym.DOWN: (0, 1),
	KeySym.LEFT: (-1, 0),
	KeySym.RIGHT: (1, 0),
}

ENTER_KEYS = (KeySym.RETURN, KeySym.KP_ENTER)


#############
# Player input handling function; returns True when the game should exit
#############

def handle_keys(key, player, display, game_map=None):
	if key is None:
		return False

	if key.sym in ENTER_KEYS and key.mod & tcod.event.Modifier.ALT:
		#Alt + Enter: toggle fullscreen
		display.toggle_fullscreen()

	elif key.sym == KeySym.ESCAPE:
		return True

	elif key.sym in MOVE_KEYS:
		dx, dy = MOVE_KEYS[key.sym]
		player.move(dx, dy, game_map)

	else:
		logger.debug('Ignoring key %r', key.sym)

	return False
