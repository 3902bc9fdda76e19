#root console, offscreen console and fullscreen state, owned by the main loop
#and handed to the render and input steps
import collections
import logging
import time

import tcod.console
import tcod.context
import tcod.event
import tcod.sdl.video
import tcod.tileset

from .constants import (SCREEN_WIDTH, SCREEN_HEIGHT, MAP_WIDTH, MAP_HEIGHT, WINDOW_TITLE,
	FONT_PATH, FONT_COLUMNS, FONT_ROWS, LIMIT_FPS)

logger = logging.getLogger(__name__)


#keeps calls to tick() under fps per second; fps <= 0 disables the cap
class FrameLimiter:
	def __init__(self, fps, clock=time.perf_counter, sleep=time.sleep):
		self.fps = fps
		self._clock = clock
		self._sleep = sleep
		self._last = None

	def tick(self):
		now = self._clock()
		if self.fps > 0 and self._last is not None:
			remaining = 1.0 / self.fps - (now - self._last)
			if remaining > 0:
				self._sleep(remaining)
				now = self._clock()
		self._last = now


class Display:
	def __init__(self, context=None, width=SCREEN_WIDTH, height=SCREEN_HEIGHT,
			map_width=MAP_WIDTH, map_height=MAP_HEIGHT, fps=LIMIT_FPS):
		#context is None when running headless (tests), nothing is shown then
		self.context = context
		self.root = tcod.console.Console(width, height, order='F')
		#draw all map graphics on this and then blit to root
		self.con = tcod.console.Console(map_width, map_height, order='F')
		self.fullscreen = False
		self.closed = False
		self.frames = 0
		self.limiter = FrameLimiter(fps)
		self._pending = collections.deque()

	@classmethod
	def open(cls, title=WINDOW_TITLE, font_path=FONT_PATH, **kwargs):
		try:
			tileset = tcod.tileset.load_tilesheet(font_path, FONT_COLUMNS, FONT_ROWS, tcod.tileset.CHARMAP_TCOD)
		except FileNotFoundError:
			logger.error('Font %s not found; point RUIN_FONT at a libtcod font such as arial10x10.png', font_path)
			raise
		display = cls(**kwargs)
		display.context = tcod.context.new(
			columns=display.root.width,
			rows=display.root.height,
			tileset=tileset,
			title=title,
			vsync=False,
		)
		logger.info('Opened %dx%d window %r with font %s', display.root.width, display.root.height, title, font_path)
		return display

	def present(self):
		if self.context is not None:
			self.context.present(self.root)
		self.frames += 1
		self.limiter.tick()

	def toggle_fullscreen(self):
		self.fullscreen = not self.fullscreen
		window = self.context.sdl_window if self.context is not None else None
		if window is not None:
			window.fullscreen = tcod.sdl.video.WindowFlags.FULLSCREEN_DESKTOP if self.fullscreen else 0
		logger.info('Fullscreen %s', 'on' if self.fullscreen else 'off')
		return self.fullscreen

	def push_event(self, event):
		self._pending.append(event)

	def _next_event(self):
		while not self._pending:
			self._pending.extend(tcod.event.wait())
		return self._pending.popleft()

	#hang until a key is pressed; None means the window was closed instead
	def wait_for_keypress(self):
		while not self.closed:
			event = self._next_event()
			if isinstance(event, tcod.event.Quit):
				logger.info('Window closed')
				self.closed = True
			elif isinstance(event, tcod.event.KeyDown):
				return event
		return None

	def close(self):
		if self.context is not None:
			self.context.close()
			self.context = None

	def __enter__(self):
		return self

	def __exit__(self, *exc_info):
		self.close()
