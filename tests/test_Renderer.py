import pygame
from pygame import Rect

from Renderer import CHART_WIDTH, COLOR_CHART_BG, Renderer, chart_points
from Simulation import Simulation


def test_chart_needs_two_samples():
    assert chart_points([], Rect(0, 0, 100, 50)) == []
    assert chart_points([7], Rect(0, 0, 100, 50)) == []


def test_chart_points_span_rect():
    rect = Rect(10, 20, 101, 51)
    points = chart_points([0, 5, 10], rect)
    assert points == [(10, 70), (60, 45), (110, 20)]
    assert all(rect.collidepoint(p) for p in points)


def test_flat_empty_history_sits_on_bottom():
    points = chart_points([0, 0, 0], Rect(0, 0, 30, 10))
    assert [y for _, y in points] == [9, 9, 9]


def test_population_history_is_charted(rng, soil_grid):
    pygame.font.init()
    sim = Simulation(soil_grid, population_floor=3, rng=rng)
    for _ in range(5):
        sim.update()
    screen = pygame.Surface((soil_grid.size_x + CHART_WIDTH, soil_grid.size_y))
    Renderer(sim, screen).render()
    corner = (screen.get_width() - CHART_WIDTH - 10 + 8, 10 + 8)
    assert screen.get_at(corner)[:3] in (COLOR_CHART_BG, (120, 200, 255))
