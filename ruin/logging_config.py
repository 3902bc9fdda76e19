import logging
import os
import sys

from .constants import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV

LOG_FORMAT = '[%(asctime)s] [%(levelname)s] %(name)s: %(message)s'


#level named by RUIN_LOG_LEVEL, or default_level if unset or unknown
def resolve_level(default_level=DEFAULT_LOG_LEVEL):
	level_name = os.getenv(LOG_LEVEL_ENV)
	if not level_name:
		return default_level
	level = getattr(logging, level_name.strip().upper(), None)
	if not isinstance(level, int):
		return default_level
	return level


#one stream handler on the root logger; calling again replaces it
def configure_logging(default_level=DEFAULT_LOG_LEVEL, stream=None):
	handler = logging.StreamHandler(stream=stream or sys.stderr)
	handler.setFormatter(logging.Formatter(LOG_FORMAT))

	root = logging.getLogger()
	root.setLevel(resolve_level(default_level))
	for h in list(root.handlers):
		root.removeHandler(h)
	root.addHandler(handler)
	return handler
