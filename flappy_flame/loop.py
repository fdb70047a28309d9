import time


class FrameLoop:
    """Fixed-step scheduler: calls ``step`` once per elapsed frame period.

    ``clock`` returns seconds and is injectable so tests can drive time by
    hand. When the caller falls behind (window dragged, debugger), at most
    ``max_catchup`` steps run per ``advance`` and the backlog is dropped.
    """

    def __init__(self, step, clock=time.perf_counter, fps=60, max_catchup=5):
        self.step = step
        self.clock = clock
        self.period = 1.0 / fps
        self.max_catchup = max_catchup
        self.last_t = None
        self.frames = 0

    def advance(self):
        now = self.clock()
        if self.last_t is None:
            self.last_t = now
            return 0
        due = int((now - self.last_t) / self.period)
        if due <= 0:
            return 0
        steps = min(due, self.max_catchup)
        if due > steps:
            self.last_t = now
        else:
            self.last_t += due * self.period
        for _ in range(steps):
            self.step()
        self.frames += steps
        return steps

    def run_frames(self, n):
        for _ in range(n):
            self.step()
        self.frames += n
        return n
