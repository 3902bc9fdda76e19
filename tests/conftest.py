import pytest

from ruin.display import Display
from ruin.mapgen import make_map


@pytest.fixture
def game_map():
	return make_map()


@pytest.fixture
def display():
	# headless: no window, no frame cap
	return Display(context=None, fps=0)
