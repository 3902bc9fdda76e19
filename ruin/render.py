from .constants import color_dark_wall, color_dark_ground

##########################
# render_all(): draws entities and map to the offscreen console, shows it, then wipes the entities
##########################

def render_all(display, entities, game_map):
	con = display.con

	for entity in entities:
		entity.draw(con)

	for y in range(game_map.height):
		for x in range(game_map.width):
			wall = game_map[x][y].block_sight
			if wall:
				con.bg[x, y] = color_dark_wall
			else:
				con.bg[x, y] = color_dark_ground

	con.blit(display.root, 0, 0, 0, 0, game_map.width, game_map.height)
	display.present()

	#erase all entities after presenting in case they move before next frame
	for entity in entities:
		entity.clear(con)
