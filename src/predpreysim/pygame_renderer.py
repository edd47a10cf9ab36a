from dataclasses import dataclass

import pygame

from predpreysim.field import FieldSnapshot
from predpreysim.view import FieldStats, SimulatorView


@dataclass
class GuiStyle:
    margin: int = 10
    panel_width: int = 220
    panel_padding: int = 12
    background_color: tuple = (245, 245, 245)
    panel_background: tuple = (235, 235, 235)
    grid_color: tuple = (210, 210, 210)
    empty_color: tuple = (255, 255, 255)
    unknown_color: tuple = (128, 128, 128)
    text_color: tuple = (20, 20, 20)


class PyGameView(SimulatorView):
    def __init__(self, depth: int, width: int, cell_size: int = 12, fps: int = 20):
        super().__init__(depth, width)
        self.cell_size = cell_size
        self.fps = fps
        self.style = GuiStyle()
        self.closed = False

        board_w, board_h = self._board_size()
        # board plus side panel, with a status line under the board
        pygame.init()
        self.screen = pygame.display.set_mode(
            (board_w + 2 * self.style.margin + self.style.panel_width, board_h + 2 * self.style.margin + 24)
        )
        pygame.display.set_caption(f"predpreysim {depth}x{width}")
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont(None, 20)
        self.small_font = pygame.font.SysFont(None, 16)

        self.history_steps = []
        self.history_prey = []
        self.history_pred = []
        self.history_max = 200

    def close(self) -> None:
        if not self.closed:
            self.closed = True
            pygame.quit()

    def is_viable(self, snapshot: FieldSnapshot) -> bool:
        if self.closed:
            return False
        return super().is_viable(snapshot)

    def show_status(self, step: int, snapshot: FieldSnapshot) -> None:
        if self.closed:
            return
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.close()
                return

        stats = FieldStats(snapshot)
        self.screen.fill(self.style.background_color)
        self._draw_cells(snapshot)
        self._draw_grid()
        self._draw_text(step, stats)
        self._draw_panel(step, stats)

        pygame.display.flip()
        self.clock.tick(self.fps)

    def _cell_rect(self, row: int, col: int) -> pygame.Rect:
        return pygame.Rect(
            self.style.margin + col * self.cell_size,
            self.style.margin + row * self.cell_size,
            self.cell_size,
            self.cell_size,
        )

    def _draw_cells(self, snapshot: FieldSnapshot) -> None:
        board = pygame.Rect((self.style.margin, self.style.margin), self._board_size())
        pygame.draw.rect(self.screen, self.style.empty_color, board)
        for location, kind in snapshot.occupied():
            color = self.colors.get(kind, self.style.unknown_color)
            pygame.draw.rect(self.screen, color, self._cell_rect(location.row, location.col))

    def _board_size(self) -> tuple:
        return self.width * self.cell_size, self.depth * self.cell_size

    def _draw_grid(self) -> None:
        # thin cells would be all grid
        if self.cell_size < 6:
            return
        left = top = self.style.margin
        board_w, board_h = self._board_size()
        for col in range(self.width + 1):
            edge = left + col * self.cell_size
            pygame.draw.line(self.screen, self.style.grid_color, (edge, top), (edge, top + board_h), 1)
        for row in range(self.depth + 1):
            edge = top + row * self.cell_size
            pygame.draw.line(self.screen, self.style.grid_color, (left, edge), (left + board_w, edge), 1)

    def _draw_text(self, step: int, stats: FieldStats) -> None:
        text = f"Step: {step}  Population: {stats.details()}"
        surface = self.font.render(text, True, self.style.text_color)
        self.screen.blit(surface, (self.style.margin, self.style.margin + self.depth * self.cell_size + 2))

    def _draw_panel(self, step: int, stats: FieldStats) -> None:
        panel_x = self.style.margin + self.width * self.cell_size + self.style.margin
        panel_y = self.style.margin
        panel_w = self.style.panel_width - self.style.margin
        panel_h = self.depth * self.cell_size
        rect = pygame.Rect(panel_x, panel_y, panel_w, panel_h)
        pygame.draw.rect(self.screen, self.style.panel_background, rect)

        prey = stats.counts["prey"]
        pred = stats.counts["predator"]
        self._push_history(step, prey, pred)

        y = panel_y + self.style.panel_padding
        y = self._panel_text(panel_x, y, f"Step: {step}", heading=True)
        y = self._panel_text(panel_x, y, f"Prey: {prey}")
        y = self._panel_text(panel_x, y, f"Pred: {pred}")

        spark_h = min(90, max(panel_h - (y - panel_y) - 2 * self.style.panel_padding, 0))
        if spark_h < 20:
            return
        spark_y = panel_y + panel_h - spark_h - self.style.panel_padding
        spark_rect = pygame.Rect(panel_x + self.style.panel_padding, spark_y, panel_w - 2 * self.style.panel_padding, spark_h)
        pygame.draw.rect(self.screen, (225, 225, 225), spark_rect)
        self._draw_sparkline(spark_rect)

    def _push_history(self, step: int, prey: int, pred: int) -> None:
        if self.history_steps and step <= self.history_steps[-1]:
            # reset
            self.history_steps.clear()
            self.history_prey.clear()
            self.history_pred.clear()
        self.history_steps.append(step)
        self.history_prey.append(prey)
        self.history_pred.append(pred)
        if len(self.history_steps) > self.history_max:
            self.history_steps.pop(0)
            self.history_prey.pop(0)
            self.history_pred.pop(0)

    def _panel_text(self, left: int, top: int, text: str, heading: bool = False) -> int:
        """Blit one line of panel text and return the top of the next line."""
        label = (self.font if heading else self.small_font).render(text, True, self.style.text_color)
        self.screen.blit(label, (left + self.style.panel_padding, top))
        return top + label.get_height() + 2

    def _draw_sparkline(self, rect: pygame.Rect) -> None:
        if len(self.history_steps) < 2:
            return
        max_count = max(max(self.history_prey), max(self.history_pred), 1)
        n = len(self.history_steps)
        series = (
            (self.history_prey, self.colors.get("prey", self.style.unknown_color)),
            (self.history_pred, self.colors.get("predator", self.style.unknown_color)),
        )
        for i in range(1, n):
            x0 = rect.x + int((i - 1) / (n - 1) * rect.width)
            x1 = rect.x + int(i / (n - 1) * rect.width)
            for values, color in series:
                y0 = rect.y + rect.height - int(values[i - 1] / max_count * rect.height)
                y1 = rect.y + rect.height - int(values[i] / max_count * rect.height)
                pygame.draw.line(self.screen, color, (x0, y0), (x1, y1), 2)
