import logging
import sys
from typing import List, Optional

import pygame

from softraster import raster
from softraster.config import RenderConfig, parse_args
from softraster.logging_config import setup_logging
from softraster.mesh import Mesh, MeshLoadError
from softraster.renderer import Renderer
from softraster.surfaces import ImageSurface, PygameSurface

logger = logging.getLogger(__name__)

HUD_COLOR = (235, 235, 235)


def load_mesh(config: RenderConfig) -> Mesh:
    if config.mesh_path is None:
        logger.info("No mesh given, using the built-in cube")
        return Mesh.cube()
    return Mesh.load(config.mesh_path)


def snapshot(config: RenderConfig, path: str, t: float = 0.0) -> None:
    """Render a single frame at time t into an image file."""
    renderer = Renderer(load_mesh(config), config)
    surface = ImageSurface(config.width, config.height, config.background)
    frame = renderer.render(surface, t)
    surface.save(path)
    logger.info("Saved frame t=%.3f to %s (%d triangles drawn, %d culled)",
                t, path, len(frame.triangles), frame.culled)


# ============================================================
#  Main loop
# ============================================================

def run(config: RenderConfig) -> None:
    """
    Interactive loop:
      - handle window events
      - render one frame per iteration from the elapsed time
      - flip when the renderer asked for a redraw
    """
    renderer = Renderer(load_mesh(config), config)

    pygame.init()
    screen = pygame.display.set_mode(config.size)
    pygame.display.set_caption(f"softraster: {config.mesh_path or 'cube'}")
    surface = PygameSurface(screen)

    clock = pygame.time.Clock()
    font = pygame.font.SysFont("consolas", 16)

    # First call triggers compilation
    raster.warm_up()

    start = pygame.time.get_ticks()
    running = True
    while running:
        clock.tick(60)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False

        elapsed = (pygame.time.get_ticks() - start) / 1000.0

        surface.clear(config.background)
        frame = renderer.render(surface, elapsed)

        hud = (f"{config.draw_mode.value.upper()} | sort: {config.depth_sort} | "
               f"drawn: {len(frame.triangles)} culled: {frame.culled} | FPS: {clock.get_fps():.1f}")
        screen.blit(font.render(hud, True, HUD_COLOR), (10, 10))

        if surface.take_redraw():
            pygame.display.flip()

    pygame.quit()


def main(argv: Optional[List[str]] = None) -> int:
    config, options = parse_args(argv)
    setup_logging(logging.DEBUG if options.verbose else logging.INFO, options.log_file)

    try:
        if options.snapshot:
            snapshot(config, options.snapshot, options.time)
        else:
            run(config)
    except MeshLoadError as e:
        logger.error("Cannot start: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
