import numpy as np
import pygame
import pygame.gfxdraw

from brick_breaker import config


class Renderer:
    """Draws a game's render data onto a pygame surface."""

    def __init__(self, width=config.FIELD_WIDTH, height=config.FIELD_HEIGHT, surface=None):
        pygame.init()
        pygame.font.init()
        self.width = width
        self.height = height
        self.screen = surface if surface is not None else pygame.Surface((width, height))
        self.font_ui = pygame.font.Font(None, 32)
        self.font_banner = pygame.font.Font(None, 64)

    def draw(self, data):
        self.screen.fill(config.COLOR_BG)
        self._render_game(data["shapes"])
        self._render_ui(data)
        return self.screen

    def _render_game(self, shapes):
        for shape in shapes:
            x, y = shape["center"]
            if shape["kind"] == "circle":
                r = int(shape["radius"])
                pygame.gfxdraw.filled_circle(self.screen, int(x), int(y), r, shape["color"])
                pygame.gfxdraw.aacircle(self.screen, int(x), int(y), r, shape["color"])
            else:
                w, h = shape["size"]
                rect = pygame.Rect(0, 0, w, h)
                rect.center = (int(x), int(y))
                pygame.draw.rect(self.screen, shape["color"], rect)

    def _render_ui(self, data):
        score_text = self.font_ui.render(data["score_text"], True, config.COLOR_TEXT)
        self.screen.blit(score_text, (16, 16))

        if data["banner"]:
            lines = data["banner"].split("\n")
            line_height = self.font_banner.get_linesize()
            top = self.height / 2 - line_height * len(lines) / 2
            for i, line in enumerate(lines):
                text = self.font_banner.render(line, True, data["banner_color"])
                text_rect = text.get_rect(center=(self.width / 2, top + line_height * (i + 0.5)))
                self.screen.blit(text, text_rect)

    def to_array(self):
        arr = pygame.surfarray.array3d(self.screen)
        return np.transpose(arr, (1, 0, 2)).astype(np.uint8)
