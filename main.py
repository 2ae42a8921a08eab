from settings import load_settings
from turnmanager import create_demo_state
from visualization import Visualization
import pygame
from OpenGL.GLU import gluOrtho2D

def run_game_loop(state, vis, clock, fps):
	"""Poll input, update and draw once per frame until the window is closed."""
	running = True
	while running:
		click = None
		for event in pygame.event.get():
			if event.type == pygame.QUIT:
				running = False
			elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
				click = event.pos

		state.update(click)

		hover_info = vis.get_hover_info(pygame.mouse.get_pos())
		vis.render(hover_info)
		pygame.display.flip()
		clock.tick(fps)

def main():
	settings = load_settings()
	pygame.init()
	pygame.display.set_caption(settings.title)
	pygame.display.set_mode((settings.window_w, settings.window_h), pygame.OPENGL | pygame.DOUBLEBUF)
	gluOrtho2D(0, settings.window_w, settings.window_h, 0)
	clock = pygame.time.Clock()

	state = create_demo_state(settings)
	vis = Visualization(state, settings)
	print(f"{settings.title}: {len(state.board)} tiles, units at {[u.position for u in state.units]}")

	try:
		run_game_loop(state, vis, clock, settings.fps)
	finally:
		pygame.quit()

if __name__ == "__main__":
	main()
