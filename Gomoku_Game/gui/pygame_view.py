"""Pygame-based board renderer and mouse/keyboard input loop."""

from ..Board import Piece
from .layout import BoardLayout


class PygameView:
    # --- Constants ---
    COLOR_BACKGROUND = (40, 30, 20)
    COLOR_WOOD = (218, 165, 32)
    COLOR_GRID = (0, 0, 0)
    COLOR_PANEL = (60, 40, 20)
    COLOR_TEXT = (230, 230, 230)
    COLOR_TURN = (102, 126, 234)
    COLOR_WIN = (231, 76, 60)
    COLOR_DRAW = (243, 156, 18)
    COLOR_SHADOW = (0, 0, 0, 77)
    COLOR_BLACK_STONE = (0, 0, 0)
    COLOR_BLACK_HIGHLIGHT = (102, 102, 102)
    COLOR_WHITE_STONE = (221, 221, 221)
    COLOR_WHITE_HIGHLIGHT = (255, 255, 255)
    COLOR_BUTTON = (102, 126, 234)

    PANEL_HEIGHT = 80
    STAR_RADIUS = 4

    def __init__(self, controller, window_size=640, padding=30):
        import pygame

        self._pygame = pygame
        self.controller = controller
        self.window_size = window_size

        pygame.init()
        try:
            self.screen = pygame.display.set_mode((window_size, window_size + self.PANEL_HEIGHT))
        except pygame.error as exc:
            pygame.quit()
            raise RuntimeError(f"Unable to open a display surface: {exc}") from exc
        pygame.display.set_caption("Gomoku")

        # Fonts
        self.font_large = pygame.font.Font(None, 40)
        self.font_small = pygame.font.Font(None, 28)

        # The board sits below the status panel
        self.layout = BoardLayout(controller.game.get_board_size(), window_size, padding)
        controller.layout = self.layout
        self.board_origin = (0, self.PANEL_HEIGHT)
        self.restart_rect = pygame.Rect(window_size - 130, (self.PANEL_HEIGHT - 40) // 2, 110, 40)
        self.board_surface = self._build_board_surface()

    def _build_board_surface(self):
        pygame = self._pygame
        size = self.window_size
        surf = pygame.Surface((size, size)).convert()
        surf.fill(self.COLOR_WOOD)

        start = self.layout.padding
        end = self.layout.grid_end()
        for i in range(self.layout.board_size):
            x, y = self.layout.to_pixel(i, i)
            pygame.draw.line(surf, self.COLOR_GRID, (start, y), (end, y), 1)
            pygame.draw.line(surf, self.COLOR_GRID, (x, start), (x, end), 1)

        for row, col in self.layout.star_points():
            pygame.draw.circle(surf, self.COLOR_GRID, self.layout.to_pixel(row, col), self.STAR_RADIUS)
        return surf

    def _screen_pos(self, row, col):
        x, y = self.layout.to_pixel(row, col)
        ox, oy = self.board_origin
        return ox + x, oy + y

    def _draw_text(self, text, font, color, center_pos):
        text_surface = font.render(text, True, color)
        text_rect = text_surface.get_rect(center=center_pos)
        self.screen.blit(text_surface, text_rect)

    def _draw_stone(self, row, col, piece):
        pygame = self._pygame
        cx, cy = self._screen_pos(row, col)
        radius = self.layout.stone_radius()

        # Drop shadow drawn on its own alpha surface
        size = int(radius * 2) + 4
        shadow = pygame.Surface((size, size), pygame.SRCALPHA)
        pygame.draw.circle(shadow, self.COLOR_SHADOW, (size / 2, size / 2), radius)
        self.screen.blit(shadow, (cx + 2 - size / 2, cy + 2 - size / 2))

        if piece is Piece.BLACK:
            body, highlight = self.COLOR_BLACK_STONE, self.COLOR_BLACK_HIGHLIGHT
        else:
            body, highlight = self.COLOR_WHITE_STONE, self.COLOR_WHITE_HIGHLIGHT
        pygame.draw.circle(self.screen, body, (cx, cy), radius)
        pygame.draw.circle(self.screen, highlight, (cx - radius * 0.3, cy - radius * 0.3), radius * 0.35)
        pygame.draw.circle(self.screen, self.COLOR_GRID, (cx, cy), radius, 1)

    def _draw_stones(self):
        game = self.controller.game
        for row, cells in enumerate(game.get_board()):
            for col, piece in enumerate(cells):
                if piece is not Piece.EMPTY:
                    self._draw_stone(row, col, piece)

    def _draw_info_panel(self):
        pygame = self._pygame
        panel_rect = pygame.Rect(0, 0, self.window_size, self.PANEL_HEIGHT)
        pygame.draw.rect(self.screen, self.COLOR_PANEL, panel_rect)

        state = self.controller.game.get_game_state()
        if state.is_over:
            color = self.COLOR_WIN if state.winner is not None else self.COLOR_DRAW
        else:
            color = self.COLOR_TURN
        status_center = ((self.window_size - 140) / 2, self.PANEL_HEIGHT / 2)
        self._draw_text(self.controller.status_message(), self.font_large, color, status_center)

        pygame.draw.rect(self.screen, self.COLOR_BUTTON, self.restart_rect, border_radius=6)
        self._draw_text("Restart", self.font_small, self.COLOR_TEXT, self.restart_rect.center)

    def render(self):
        self.screen.fill(self.COLOR_BACKGROUND)
        self.screen.blit(self.board_surface, self.board_origin)
        self._draw_stones()
        self._draw_info_panel()
        self._pygame.display.flip()

    def handle_event(self, event):
        """Apply one pygame event. Returns False when the window should close."""
        pygame = self._pygame
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return False
            if event.key == pygame.K_r:
                self.controller.restart()
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.restart_rect.collidepoint(event.pos):
                self.controller.restart()
            else:
                mx, my = event.pos
                ox, oy = self.board_origin
                self.controller.click(mx - ox, my - oy)
        return True

    def run(self):
        pygame = self._pygame
        clock = pygame.time.Clock()
        running = True
        try:
            while running:
                for event in pygame.event.get():
                    if not self.handle_event(event):
                        running = False
                        break
                self.render()
                clock.tick(30)
        finally:
            self.close()

    def close(self):
        self._pygame.quit()
