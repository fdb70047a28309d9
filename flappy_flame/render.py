"""pygame drawing of a Session. Reads state only."""

import math

import pygame

from .config import HEIGHT, WIDTH

SKY_TOP = (135, 206, 235)
SKY_MID = (224, 246, 255)
SKY_BOTTOM = (144, 238, 144)
BIRD_COLOR = (255, 215, 0)
BIRD_OUTLINE = (255, 165, 0)
PIPE_DARK = (26, 26, 26)
PIPE_MID = (45, 45, 45)
PIPE_EDGE = (255, 100, 0)
TEXT = (0, 0, 0)
LABEL = (34, 139, 34)
PANEL = (20, 20, 30, 200)
PANEL_TEXT = (235, 235, 235)

FIRE_BLOCK = 50
FLAME_HEIGHT = 40

MEDALS = {'gold': (255, 200, 40), 'silver': (200, 200, 210), 'bronze': (205, 127, 50)}


# ---------------- STATIC SURFACES ----------------
def make_gradient(w, h):
    surf = pygame.Surface((w, h))
    half = h / 2
    for y in range(h):
        if y < half:
            a, b, t = SKY_TOP, SKY_MID, y / half
        else:
            a, b, t = SKY_MID, SKY_BOTTOM, (y - half) / half
        col = tuple(int(a[i] + (b[i] - a[i]) * t) for i in range(3))
        pygame.draw.line(surf, col, (0, y), (w, y))
    return surf


def create_bird_frames(radius=24, frames=6):
    frames_list = []
    for i in range(frames):
        surf = pygame.Surface((radius * 4, radius * 4), pygame.SRCALPHA)
        cx, cy = radius * 2, radius * 2
        pygame.draw.circle(surf, BIRD_COLOR, (cx, cy), radius)
        pygame.draw.circle(surf, BIRD_OUTLINE, (cx, cy), radius, 2)
        pygame.draw.polygon(surf, (255, 140, 20), [(cx + radius, cy), (cx + radius + 10, cy - 6), (cx + radius + 10, cy + 6)])
        angle = math.sin(i / frames * math.pi * 2)
        wing_dy = int((radius * 0.6) * math.sin(angle))
        pygame.draw.ellipse(surf, (230, 200, 60), (cx - radius * 0.8, cy - 8 + wing_dy, radius * 1.6, radius * 0.9))
        pygame.draw.circle(surf, (20, 20, 20), (cx + radius // 3, cy - radius // 3), 3)
        frames_list.append(surf)
    return frames_list


# ---------------- RENDERER ----------------
class Renderer:
    def __init__(self, surface):
        self.surface = surface
        self.background = make_gradient(WIDTH, HEIGHT)
        self.font_big = pygame.font.SysFont('Arial', 44, bold=True)
        self.font_mid = pygame.font.SysFont('Arial', 24, bold=True)
        self.font_small = pygame.font.SysFont('Arial', 18, bold=True)
        self.font_tiny = pygame.font.SysFont('Arial', 14, bold=True)
        self.bird_frames = None

    def draw(self, session, screen_name):
        surf = self.surface
        surf.blit(self.background, (0, 0))
        self.draw_clouds(session.frame)
        for p in session.pipes:
            self.draw_pipe(p, session.frame)
        self.draw_bird(session.bird, session.frame)
        self.draw_hud(session)

        overlay = getattr(self, f'screen_{screen_name}', None)
        if overlay:
            overlay(session)

    # ---------------- CLOUDS ----------------
    def draw_clouds(self, frame):
        y1 = 50 + (frame * 0.5) % 100
        y2 = 150 + (frame * 0.3) % 100
        self.draw_cloud(80, y1, 30)
        self.draw_cloud(300, y2, 40)

    def draw_cloud(self, x, y, size):
        s = pygame.Surface((int(size * 4), int(size * 3)), pygame.SRCALPHA)
        ox, oy = size * 2, size * 1.5
        col = (255, 255, 255, 153)
        for cx, cy, r in ((ox, oy, size), (ox + size * 0.8, oy - size * 0.3, size * 0.8),
                          (ox - size * 0.8, oy - size * 0.3, size * 0.8)):
            pygame.draw.circle(s, col, (int(cx), int(cy)), int(r))
        self.surface.blit(s, (x - ox, y - oy))

    # ---------------- FIRE PIPES ----------------
    def draw_pipe(self, pipe, frame):
        top, bottom = pipe.segments()
        self.draw_fire_segment(top, frame, is_top=True)
        self.draw_fire_segment(bottom, frame, is_top=False)

    def draw_fire_segment(self, rect, frame, is_top):
        x, y, w, h = rect
        if h <= 0:
            return
        body = pygame.Rect(int(x), int(y), int(w), int(math.ceil(h)))
        pygame.draw.rect(self.surface, PIPE_DARK, body)
        pygame.draw.rect(self.surface, PIPE_MID, body.inflate(-w // 2, 0))

        count = int(math.ceil(h / FIRE_BLOCK))
        for i in range(count):
            block_y = y + i * FIRE_BLOCK
            block_h = min(FIRE_BLOCK, h - i * FIRE_BLOCK)
            if block_h <= 0:
                continue
            offset = (frame + x + i * 7) % 20
            # only the block at the gap gets flames pointing into it
            edge = is_top and i == count - 1
            base_y = block_y + (block_h if edge else 0)
            direction = -1 if edge else 1
            for j, fx in enumerate((0.1, 0.3, 0.5, 0.7, 0.9)):
                self.draw_flame(x + w * fx, base_y, direction, frame, offset + j * 2)

        pygame.draw.rect(self.surface, PIPE_EDGE, body, 2)

    def draw_flame(self, bx, by, direction, frame, phase):
        flicker = (math.sin(frame * 0.08 + phase) * 8
                   + math.sin(frame * 0.12 + phase + 1) * 6
                   + math.cos(frame * 0.15 + phase + 2) * 4)
        wobble = math.sin(frame * 0.1 + phase) * 6 + math.cos(frame * 0.18 + phase) * 4
        tip_y = by + (flicker + FLAME_HEIGHT * 0.8) * direction
        tip_x = bx + wobble

        pygame.draw.circle(self.surface, (255, 220, 80), (int(bx), int(by)), 12)
        outer = [(bx - 12, by), (tip_x - 8, tip_y), (tip_x + 3, tip_y - 10 * direction),
                 (tip_x + 8, tip_y), (bx + 12, by)]
        pygame.draw.polygon(self.surface, (255, 200, 50), outer)
        inner = [(bx - 8, by), (tip_x, tip_y + 5 * direction), (bx + 8, by)]
        pygame.draw.polygon(self.surface, (255, 140, 0), inner)
        pygame.draw.circle(self.surface, (255, 60, 0), (int(tip_x), int(tip_y)), 5)

    # ---------------- BIRD ----------------
    def draw_bird(self, bird, frame):
        if self.bird_frames is None:
            self.bird_frames = create_bird_frames(int(bird.width // 3), frames=6)
        img = self.bird_frames[(frame // 6) % len(self.bird_frames)]
        rotation = min(bird.vel / 10, 0.5)
        rot = pygame.transform.rotozoom(img, -math.degrees(rotation), 1.0)
        rx, ry = rot.get_size()
        self.surface.blit(rot, (int(bird.x - rx // 2), int(bird.y - ry // 2)))

    # ---------------- HUD ----------------
    def draw_hud(self, session):
        s = self.surface
        s.blit(self.font_mid.render(f'Score: {session.score}', True, TEXT), (10, 14))
        s.blit(self.font_small.render(f'High: {session.high_score}', True, TEXT), (10, 44))
        label = self.font_tiny.render(session.difficulty.upper(), True, LABEL)
        s.blit(label, (WIDTH - 10 - label.get_width(), 18))

    def panel(self, lines, title=None, title_color=PANEL_TEXT):
        s = self.surface
        shade = pygame.Surface((WIDTH, HEIGHT), pygame.SRCALPHA)
        shade.fill((0, 0, 0, 110))
        s.blit(shade, (0, 0))
        box = pygame.Rect(0, 0, WIDTH - 160, 120 + 34 * len(lines))
        box.center = (WIDTH // 2, HEIGHT // 2)
        pygame.draw.rect(s, PANEL, box, border_radius=14)
        y = box.y + 24
        if title:
            t = self.font_big.render(title, True, title_color)
            s.blit(t, (WIDTH // 2 - t.get_width() // 2, y))
            y += 70
        for line in lines:
            t = self.font_small.render(line, True, PANEL_TEXT)
            s.blit(t, (WIDTH // 2 - t.get_width() // 2, y))
            y += 34
        return box

    # ---------------- SCREENS ----------------
    def screen_intro(self, session):
        self.panel([
            f'Best score: {session.high_score}',
            f'Games played: {session.games_played}',
            f'Total score: {session.total_score}',
            f'Average: {session.average_score():.1f}',
            '',
            'ENTER / SPACE  start      S  settings',
            'H  high score      Q  quit',
        ], title='FLAPPY FLAME')

    def screen_menu(self, session):
        self.panel([
            'ENTER / SPACE  play',
            'S  settings',
            'H  high score',
            'Q  quit',
        ], title='MENU')

    def screen_settings(self, session):
        self.panel([
            f'Difficulty: {session.difficulty.upper()}   (D to change)',
            f'Volume: {session.volume}   (UP / DOWN)',
            f'Music: {session.track_name}   (LEFT / RIGHT)',
            '',
            'M  back to menu',
        ], title='SETTINGS')

    def screen_highscore(self, session):
        box = self.panel([
            f'High score: {session.high_score}',
            '',
            'M  back to menu',
        ], title='HIGH SCORE')
        pygame.draw.circle(self.surface, MEDALS[session.medal()], (box.right - 60, box.y + 50), 26)

    def screen_pause(self, session):
        self.panel(['ESC  resume'], title='PAUSED')

    def screen_gameover(self, session):
        cause = 'You fell!' if session.end_cause == 'fall' else 'Burned by a pipe!'
        self.panel([
            cause,
            f'Score: {session.score}    High: {session.high_score}',
            '',
            'SPACE  play again      M  menu',
        ], title='GAME OVER', title_color=(255, 120, 120))
