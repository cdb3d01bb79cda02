import asyncio


class MazeApp:
    def __init__(self, rows=None, cols=None, seed=None):
        # ---------------------------
        # LAZY IMPORTS
        # ---------------------------
        import pygame
        import pygame_gui
        from terrainmaze.config import (
            get_logger, MAZE_ROWS, MAZE_COLS, SIDE_PANEL_WIDTH, BUTTON_BAR_HEIGHT
        )
        from terrainmaze.maze import MazeConfig, MazeGenerator
        from terrainmaze.ui.controller import MazeController
        from terrainmaze.ui.mazeView import MazeView
        from terrainmaze.ui.panelManager import PanelManager

        self.logger = get_logger(__name__)
        self.logger.info("=" * 60)
        self.logger.info("Maze app initialization started")

        # ---------------------------
        # ENGINE INIT
        # ---------------------------
        config = MazeConfig(rows=rows or MAZE_ROWS, cols=cols or MAZE_COLS, seed=seed)
        self.controller = MazeController(MazeGenerator(config))

        # ---------------------------
        # SCREEN INIT
        # ---------------------------
        pygame.init()
        self.view = MazeView(config.rows, config.cols)
        self.screen_width = self.view.width + SIDE_PANEL_WIDTH
        self.screen_height = self.view.height + BUTTON_BAR_HEIGHT

        self.screen = pygame.display.set_mode((self.screen_width, self.screen_height))
        pygame.display.set_caption("Maze Project - Multi Finish Lines (3 Targets)")
        self.logger.info(f"Window initialized at {self.screen_width}x{self.screen_height}")

        self.maze_surface = pygame.Surface((self.view.width, self.view.height))
        self.clock = pygame.time.Clock()
        self.running = True

        # ---------------------------
        # PANEL
        # ---------------------------
        self.manager = pygame_gui.UIManager((self.screen_width, self.screen_height))
        self.panel = PanelManager(self.manager, self.controller, self.view.width, self.view.height)
        self.logger.info("Maze app initialization completed successfully")

    async def main_loop(self):
        import pygame
        from terrainmaze.config import TARGET_FPS
        from terrainmaze.ui.UItheme import UITheme

        self.logger.info("Entering main loop")
        frame_count = 0

        while self.running:
            elapsed_ms = self.clock.tick(TARGET_FPS)
            frame_count += 1

            if self.panel.process_events(pygame.event.get()) == "quit":
                self.logger.info("Quit requested by user")
                self.running = False

            # update
            self.controller.tick(elapsed_ms)
            self.panel.refresh_statistics()
            self.manager.update(elapsed_ms / 1000.0)

            # draw
            self.screen.fill(UITheme.BACKGROUND)
            self.view.draw(self.maze_surface, self.controller)
            self.screen.blit(self.maze_surface, (0, 0))
            self.panel.draw(self.screen)
            self.manager.draw_ui(self.screen)
            pygame.display.flip()
            await asyncio.sleep(0)

        self.logger.info(f"Main loop exited after {frame_count} frames")


async def main():
    import pygame
    from terrainmaze.config import get_project_root, setup_logging

    # Initialize logging first
    project_root = get_project_root()
    logger = setup_logging(project_root)

    logger.info("=" * 60)
    logger.info("Application started")
    logger.info(f"Project root: {project_root}")

    try:
        app = MazeApp()
        await app.main_loop()

        logger.info("Shutting down pygame...")
        pygame.quit()

    except Exception as e:
        logger.critical(f"Critical error in main: {e}", exc_info=True)
        raise
    finally:
        logger.info("Application terminated")
        logger.info("=" * 60)


def run():
    asyncio.run(main())


# ------------------------ # ENTRY POINT # ------------------------

if __name__ == "__main__":
    run()
