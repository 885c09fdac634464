"""
Conway's Game of Life - Visual Implementation with Pygame

Controls:
    LEFT CLICK  - Draw cells (hold and drag)
    RIGHT CLICK - Erase cells (hold and drag)
    UP/DOWN     - Shorten/lengthen the frame delay (hold)
    SPACE       - Pause/Resume simulation
    R           - Reset with random grid
    C           - Clear grid
    G           - Add glider at mouse position
    ESC         - Quit
"""
import logging

import pygame

from .config import (
    BLACK, GRAY, GREEN, WHITE, YELLOW,
    FRAME_DELAY_STEP_MS, LifeConfig, clamp_frame_delay,
)
from .engine import LifeEngine

logger = logging.getLogger(__name__)


class GameOfLife:
    def __init__(self, config: LifeConfig, engine: LifeEngine | None = None):
        pygame.init()  # init pygame modules

        self.config = config
        self.cell_size = config.cell_size                # cell size in pixels
        self.window_width = config.window_width
        self.window_height = config.window_height

        self.screen = pygame.display.set_mode((self.window_width, self.window_height))  # main window
        pygame.display.set_caption("Game of Life")  # window title

        if engine is None:
            engine = LifeEngine.random(
                config.rows, config.cols, config.density, config.seed,
                workers=config.workers, spontaneous_rate=config.spontaneous_rate,
            )
        self.engine = engine

        self.running = True              # simulation starts immediately
        self.frame_delay_ms = config.frame_delay_ms

        self.clock = pygame.time.Clock()                 # frame timing
        self.font = pygame.font.Font(None, 24)           # overlay font
        self.small_font = pygame.font.Font(None, 20)     # help font
        logger.info("window %dx%d, grid %dx%d, %d workers",
                    self.window_width, self.window_height, engine.rows, engine.cols, engine.workers)

    def screen_to_grid(self, sx: int, sy: int) -> tuple[int, int]:
        return sy // self.cell_size, sx // self.cell_size  # pixel -> (row, col)

    def set_cell(self, sx: int, sy: int, alive: bool) -> bool:
        row, col = self.screen_to_grid(sx, sy)  # convert coords
        return self.engine.paint(row, col, alive)  # ignored off-grid

    def change_frame_delay(self, delta_ms: int) -> None:
        self.frame_delay_ms = clamp_frame_delay(self.frame_delay_ms + delta_ms)

    def apply_held_input(self, keys, buttons, pos: tuple[int, int]) -> None:
        """React to keys and mouse buttons that are held down this frame."""
        if buttons[0]:
            self.set_cell(pos[0], pos[1], True)   # paint
        elif buttons[2]:
            self.set_cell(pos[0], pos[1], False)  # erase

        if keys[pygame.K_UP]:
            self.change_frame_delay(-FRAME_DELAY_STEP_MS)  # faster
        if keys[pygame.K_DOWN]:
            self.change_frame_delay(FRAME_DELAY_STEP_MS)  # slower

    def handle_key(self, key: int, pos: tuple[int, int]) -> bool:
        if key == pygame.K_ESCAPE:
            return False  # quit

        elif key == pygame.K_SPACE:
            self.running = not self.running  # toggle run/pause
            logger.info("paused" if not self.running else "resumed")

        elif key == pygame.K_r:
            self.engine.randomize(self.config.density)  # random reset

        elif key == pygame.K_c:
            self.engine.clear()  # clear all

        elif key == pygame.K_g:
            row, col = self.screen_to_grid(*pos)  # mouse cell
            self.engine.stamp("glider", row, col)  # stamp glider

        return True

    def handle_events(self) -> bool:
        for event in pygame.event.get():  # poll events
            if event.type == pygame.QUIT:
                return False  # close window

            elif event.type == pygame.KEYDOWN:
                if not self.handle_key(event.key, pygame.mouse.get_pos()):
                    return False

        self.apply_held_input(pygame.key.get_pressed(), pygame.mouse.get_pressed(), pygame.mouse.get_pos())
        return True  # keep running

    def draw(self) -> None:
        self.screen.fill(BLACK)  # clear window
        size = self.cell_size
        grid = self.engine.grid

        if size >= 4:  # avoid clutter when cells are tiny
            width = self.engine.cols * size
            height = self.engine.rows * size
            for x in range(0, width, size):
                pygame.draw.line(self.screen, GRAY, (x, 0), (x, height))  # vertical
            for y in range(0, height, size):
                pygame.draw.line(self.screen, GRAY, (0, y), (width, y))  # horizontal

        rows, cols = grid.nonzero()  # draw only alive cells
        for row, col in zip(rows, cols):
            pygame.draw.rect(self.screen, GREEN, (col * size + 1, row * size + 1, size - 1, size - 1))

    def draw_ui(self) -> None:
        text = self.font.render(f"Frame Delay: {self.frame_delay_ms} ms", True, WHITE)
        self.screen.blit(text, (10, 10))  # top-left overlay

        status = "RUNNING" if self.running else "PAUSED"  # state label
        color = GREEN if self.running else YELLOW         # state color
        text = self.font.render(
            f"[{status}]  Gen: {self.engine.generation}  Cells: {self.engine.population}",
            True,
            color
        )
        self.screen.blit(text, (10, 32))

        if not self.running:  # show help only when paused
            text = self.small_font.render(
                "SPACE: Play/Pause | R: Random | C: Clear | G: Glider | Click: Draw | UP/DOWN: Delay",
                True,
                WHITE
            )
            self.screen.blit(text, (10, self.window_height - 24))

    def tick(self) -> bool:
        """Run one frame. Returns False once the user asks to quit."""
        if not self.handle_events():
            return False
        if self.running:
            self.engine.step()  # advance simulation

        self.draw()
        self.draw_ui()
        pygame.display.flip()  # swap buffers

        self.clock.tick(1000 / self.frame_delay_ms)  # hold the frame for the delay
        return True

    def run(self) -> None:
        try:
            while self.tick():  # main loop
                pass
        finally:
            logger.info("closing window after %d generations", self.engine.generation)
            pygame.quit()  # clean exit
