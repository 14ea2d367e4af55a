import pygame
from core.config import FLASHLIGHT_ON_BRIGHTNESS


def draw_flashlight(screen, x, y, brightness, radius=180):
    """Draw the flashlight cone as a filled circle whose colour follows the brightness."""
    level = max(0.0, min(1.0, brightness / FLASHLIGHT_ON_BRIGHTNESS))
    if level <= 0:
        pygame.draw.circle(screen, (40, 40, 40), (x, y), radius, 1)  # Outline only when off
        return
    shade = int(255 * level)
    pygame.draw.circle(screen, (shade, shade, int(shade * 0.8)), (x, y), radius)


def draw_pause_overlay(screen, font):
    """Dim the scene and show the pause hint in the middle of the screen."""
    overlay = pygame.Surface(screen.get_size())
    overlay.fill((0, 0, 0))
    overlay.set_alpha(160)
    screen.blit(overlay, (0, 0))
    text = font.render("Paused - press ESC to resume", True, (255, 255, 255))
    screen.blit(text, text.get_rect(center=(screen.get_width() // 2, screen.get_height() // 2)))


def draw_hud(screen, font, pending_actions, frame_count):
    """Draw the key help and scheduler counters in the top-left corner."""
    lines = [
        "F: toggle flashlight   ESC: pause   Close window to quit.",
        f"Pending actions: {pending_actions}",
        f"Frame: {frame_count}",
    ]
    for i, line in enumerate(lines):
        screen.blit(font.render(line, True, (255, 255, 255)), (10, 10 + i * 26))
