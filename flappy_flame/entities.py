from .config import (BIRD_RADIUS, BIRD_SIZE, BIRD_START_Y, BIRD_X, FLAP_STRENGTH,
                     HEIGHT, PIPE_GAP, PIPE_WIDTH)


# ---------------- BIRD ----------------
class Bird:
    def __init__(self, x=BIRD_X, y=BIRD_START_Y, radius=BIRD_RADIUS,
                 width=BIRD_SIZE, height=BIRD_SIZE, flap_strength=FLAP_STRENGTH):
        self._x = x
        self.start_y = y
        self.y = y
        self.vel = 0.0
        self.radius = radius
        self.width = width
        self.height = height
        self.flap_strength = flap_strength

    @property
    def x(self):
        return self._x

    def reset(self):
        self.y = self.start_y
        self.vel = 0.0

    def flap(self):
        # impulse replaces the current velocity
        self.vel = self.flap_strength

    def apply_gravity(self, g):
        self.vel += g
        self.y += self.vel

    def box(self):
        """(left, top, right, bottom) of the bird's hit box."""
        hw, hh = self.width / 2, self.height / 2
        return (self._x - hw, self.y - hh, self._x + hw, self.y + hh)


# ---------------- PIPE ----------------
class Pipe:
    def __init__(self, x, gap_top, width=PIPE_WIDTH, gap=PIPE_GAP, field_height=HEIGHT):
        self.x = x
        self._gap_top = gap_top
        self.width = width
        self.gap = gap
        self.field_height = field_height
        self.scored = False

    @property
    def gap_top(self):
        return self._gap_top

    @property
    def gap_bottom(self):
        return self._gap_top + self.gap

    @property
    def right(self):
        return self.x + self.width

    def advance(self, dx):
        self.x -= dx

    def is_offscreen(self):
        return self.right < 0

    def segments(self):
        """Top and bottom barrier rects as (x, y, w, h)."""
        top = (self.x, 0, self.width, self._gap_top)
        bottom = (self.x, self.gap_bottom, self.width, self.field_height - self.gap_bottom)
        return top, bottom

    def __repr__(self):
        return f'Pipe(x={self.x:.1f}, gap_top={self._gap_top:.1f}, scored={self.scored})'
