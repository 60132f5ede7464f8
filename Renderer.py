import pygame
from pygame import draw, gfxdraw, Rect
from pygame.font import Font

COLOR_TEXT = (255, 255, 255)
COLOR_OUTLINE = (0, 0, 0)
COLOR_VISION = (255, 255, 0)
COLOR_MISSING = (255, 0, 255)   # stands out, easy to spot undrawn areas
COLOR_CHART_BG = (25, 25, 40)
COLOR_CHART_LINE = (120, 200, 255)
CHART_WIDTH, CHART_HEIGHT = 160, 60


def chart_points(history, rect):
    '''
        Polyline for a population history inside rect, oldest sample on the
        left, the highest count touching the top edge.
    '''
    history = list(history)
    if len(history) < 2:
        return []
    peak = max(max(history), 1)
    step = (rect.width - 1) / (len(history) - 1)
    bottom = rect.bottom - 1
    return [(rect.left + round(i * step), bottom - round(count / peak * (rect.height - 1)))
            for i, count in enumerate(history)]


class Renderer:
    '''
        Draws the grid and the creatures of a Simulation onto a pygame
        surface. Never changes simulation state.
    '''
    def __init__(self, simulation, screen) -> None:
        self.simulation = simulation
        self.screen = screen
        self.font = Font(None, 24)
        self.show_vision = False

    def handle_event(self, event):
        '''Returns False when the window should close.'''
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return False
            elif event.key == pygame.K_SPACE:
                self.simulation.toggle_pause()
            elif event.key == pygame.K_s:
                self.simulation.step()
            elif event.key == pygame.K_v:
                self.show_vision = not self.show_vision
        return True

    def render(self):
        self.screen.fill(COLOR_MISSING)
        self.render_tiles()
        self.render_creatures()
        self.render_population_chart()
        if self.simulation.paused:
            self.render_pause_banner()

    def render_tiles(self):
        grid = self.simulation.grid
        size = grid.tile_size
        for ix, iy, tile in grid:
            draw.rect(self.screen, tile.color, Rect(ix * size, iy * size, size, size))

    def render_creatures(self):
        for c in self.simulation.creatures:
            x, y = int(c.x), int(c.y)
            r = int(c.radius)
            if self.show_vision:
                vx, vy = c.vision_point
                # skip rays that wrapped around the world edge
                if abs(vx - c.x) <= c.vision_distance + 1 and abs(vy - c.y) <= c.vision_distance + 1:
                    draw.line(self.screen, COLOR_VISION, (x, y), (int(vx), int(vy)), 1)
            gfxdraw.filled_circle(self.screen, x, y, r, c.color)
            gfxdraw.aacircle(self.screen, x, y, r + 1, COLOR_OUTLINE)

    def render_population_chart(self):
        rect = Rect(self.screen.get_width() - CHART_WIDTH - 10, 10, CHART_WIDTH, CHART_HEIGHT)
        points = chart_points(self.simulation.state.population_history, rect)
        if not points:
            return
        draw.rect(self.screen, COLOR_CHART_BG, rect, border_radius=6)
        draw.lines(self.screen, COLOR_CHART_LINE, False, points, 1)

    def render_pause_banner(self):
        text = self.font.render("PAUSED", True, COLOR_TEXT)
        text_rect = text.get_rect()
        text_rect.center = (self.screen.get_width() // 2, 20)
        self.screen.blit(text, text_rect)
