import logging

from .constants import SCREEN_WIDTH, SCREEN_HEIGHT, TUNNEL_X1, TUNNEL_Y, color_white, color_yellow
from .display import Display
from .entity import Entity
from .keys import handle_keys
from .logging_config import configure_logging
from .mapgen import make_map
from .render import render_all

logger = logging.getLogger(__name__)


###############################
# new_game(): build the map, the player and the decoration
###############################

def new_game():
	game_map = make_map()

	#the player starts where the tunnel leaves the first room
	player = Entity(TUNNEL_X1, TUNNEL_Y, '@', color_white, name='player')
	npc = Entity(SCREEN_WIDTH // 2 - 5, SCREEN_HEIGHT // 2, 'O', color_yellow, name='npc')
	return game_map, [player, npc]

################################
# play_game(): loop through a game in progress
################################

def play_game(display, game_map, entities):
	player = entities[0]

	while not display.closed:
		render_all(display, entities, game_map)

		key = display.wait_for_keypress()
		if handle_keys(key, player, display, game_map):
			logger.info('Exit requested')
			break

	logger.info('Stopped after %d frames', display.frames)

def main():
	configure_logging()
	try:
		with Display.open() as display:
			game_map, entities = new_game()
			play_game(display, game_map, entities)
	except Exception:
		logger.exception('Game crashed')
		raise
	return 0
