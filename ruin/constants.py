import logging
import os

SCREEN_WIDTH = 80
SCREEN_HEIGHT = 50

MAP_WIDTH = 80
MAP_HEIGHT = 45

WINDOW_TITLE = 'Ruin'

#bitmap font in libtcod layout (32 columns, 8 rows), greyscale antialiasing
FONT_PATH = os.getenv('RUIN_FONT', 'arial10x10.png')
FONT_COLUMNS = 32
FONT_ROWS = 8

#caps how often frames are presented, not how often the game updates
LIMIT_FPS = 20

color_dark_wall = (0, 0, 100)
color_dark_ground = (50, 50, 150)

color_white = (255, 255, 255)
color_yellow = (255, 255, 0)

#the two fixed rooms and the row of the tunnel joining them
ROOM_1 = (20, 15, 10, 15)
ROOM_2 = (50, 15, 10, 15)
TUNNEL_X1 = 25
TUNNEL_X2 = 55
TUNNEL_Y = 23

DEFAULT_LOG_LEVEL = logging.INFO
LOG_LEVEL_ENV = 'RUIN_LOG_LEVEL'
