"""A pygame window for the raster editor."""

from __future__ import annotations

import argparse
import math

import pygame

from pixelgrid.app import (
    DEFAULT_WINDOW_HEIGHT,
    DEFAULT_WINDOW_WIDTH,
    ESCAPE,
    Application,
    MouseButton,
)

BACKGROUND = (255, 255, 255)
INK = (0, 0, 0)
GRID = (204, 204, 204)
PREVIEW = (0, 255, 0)
# Height of the status band at the bottom that the grid must not cover.
STATUS_HEIGHT = 29
STATUS_MARGIN = 10
FONT_SIZE = 18
FRAMES_PER_SECOND = 60

_BUTTONS = {1: MouseButton.LEFT, 2: MouseButton.MIDDLE, 3: MouseButton.RIGHT}
_KEY_CHARS = {pygame.K_ESCAPE: ESCAPE, pygame.K_BACKSPACE: "\b", pygame.K_RETURN: "\r"}
_font_cache: dict[int, pygame.font.Font] = {}


def _font() -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
        _font_cache.clear()
    font = _font_cache.get(FONT_SIZE)
    if font is None:
        font = _font_cache[FONT_SIZE] = pygame.font.Font(None, FONT_SIZE)
    return font


def _draw_cells(app: Application, surface: pygame.Surface) -> None:
    cell = app.view.cell_size()
    tx, ty = app.view.translation
    for x, y in app.canvas:
        left = math.floor(tx + x * cell)
        top = math.floor(ty + y * cell)
        right = math.floor(tx + (x + 1) * cell)
        bottom = math.floor(ty + (y + 1) * cell)
        pygame.draw.rect(surface, INK, (left, top, max(1, right - left), max(1, bottom - top)))


def _draw_grid(app: Application, surface: pygame.Surface) -> None:
    cell = app.view.cell_size()
    tx, ty = app.view.translation
    width, height = app.canvas.width, app.canvas.height
    right, bottom = tx + width * cell, ty + height * cell

    alpha = min(1.0, max(0.0, app.view.grid_alpha()))
    if alpha > 0.0:
        overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        color = (*GRID, round(255 * alpha))
        for x in range(1, width):
            pygame.draw.line(overlay, color, (tx + x * cell, ty), (tx + x * cell, bottom))
        for y in range(1, height):
            pygame.draw.line(overlay, color, (tx, ty + y * cell), (right, ty + y * cell))
        surface.blit(overlay, (0, 0))

    pygame.draw.lines(surface, GRID, True, [(tx, ty), (tx, bottom), (right, bottom), (right, ty)])


def render(app: Application, surface: pygame.Surface) -> None:
    """Draw the canvas, its grid, the drag preview and the status line."""
    width, height = surface.get_size()
    surface.fill(BACKGROUND)

    previous_clip = surface.get_clip()
    surface.set_clip(pygame.Rect(0, 0, width, max(0, height - STATUS_HEIGHT)))
    _draw_cells(app, surface)
    _draw_grid(app, surface)
    surface.set_clip(previous_clip)

    outline = app.preview.outline()
    if len(outline) >= 2:
        pygame.draw.lines(surface, PREVIEW, False, outline)

    text = _font().render(app.status_text(), True, INK)
    surface.blit(text, (STATUS_MARGIN, height - STATUS_MARGIN - text.get_height()))


def _dispatch(app: Application, event: pygame.event.Event) -> None:
    if event.type == pygame.QUIT:
        app.running = False
    elif event.type == pygame.KEYDOWN:
        key = _KEY_CHARS.get(event.key, event.unicode)
        if key:
            app.key_down(key)
    elif event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
        button = _BUTTONS.get(event.button)
        if button is not None:
            app.mouse_button(button, event.type == pygame.MOUSEBUTTONDOWN, *event.pos)
    elif event.type == pygame.MOUSEMOTION:
        if any(event.buttons):
            app.mouse_move(*event.pos)
    elif event.type == pygame.MOUSEWHEEL:
        if event.y:
            app.mouse_wheel(event.y, *pygame.mouse.get_pos())
    elif event.type == pygame.VIDEORESIZE:
        app.view.resize(event.w, event.h)


def main(argv: list[str] | None = None) -> int:
    """Open the editor window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="pixelgrid", description="Raster graphics editor.")
    parser.add_argument("--width", type=int, default=DEFAULT_WINDOW_WIDTH, help="window width")
    parser.add_argument("--height", type=int, default=DEFAULT_WINDOW_HEIGHT, help="window height")
    args = parser.parse_args(argv)

    app = Application(args.width, args.height)
    pygame.init()
    try:
        pygame.display.set_mode((args.width, args.height), pygame.RESIZABLE)
        pygame.display.set_caption("Raster graphics")
        clock = pygame.time.Clock()
        while app.running:
            for event in pygame.event.get():
                _dispatch(app, event)
            if not app.running:
                break
            surface = pygame.display.get_surface()
            app.view.resize(*surface.get_size())
            render(app, surface)
            pygame.display.flip()
            clock.tick(FRAMES_PER_SECOND)
    finally:
        _font_cache.clear()
        pygame.quit()
    return 0