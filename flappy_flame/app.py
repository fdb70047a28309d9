"""
Flappy Flame: pygame front end.

Controls
- SPACE / click : flap (or start from the menus)
- ESC           : pause / resume
- ENTER         : start
- S / H / M     : settings, high score, menu
- D             : cycle difficulty (settings)
- LEFT / RIGHT  : background track (settings)
- UP / DOWN     : volume (settings)
- Q             : quit

Run: python main.py
"""

import sys

import pygame

from .audio import SoundBoard
from .config import FPS, HEIGHT, WIDTH, load_settings
from .difficulty import next_difficulty
from .log import get_logger, setup_logging
from .loop import FrameLoop
from .render import Renderer
from .simulation import ENDED, IDLE, PAUSED, RUNNING, Session
from .storage import JsonStore

log = get_logger('app')

VOLUME_STEP = 10
MENU_SCREENS = ('intro', 'menu', 'settings', 'highscore')


class App:
    def __init__(self, session, renderer):
        self.session = session
        self.renderer = renderer
        self.menu_screen = 'intro'
        self.running = True

    @property
    def screen_name(self):
        phase = self.session.phase
        if phase == RUNNING:
            return 'game'
        if phase == PAUSED:
            return 'pause'
        if phase == ENDED:
            return 'gameover'
        return self.menu_screen

    def show(self, name):
        s = self.session
        if s.phase == ENDED:
            s.return_to_menu()
        if s.phase == IDLE and name in MENU_SCREENS:
            self.menu_screen = name

    def primary_action(self):
        s = self.session
        if s.phase == RUNNING:
            s.flap()
        elif s.phase in (IDLE, ENDED):
            s.start()

    def handle_event(self, event):
        s = self.session
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.MOUSEBUTTONDOWN:
            self.primary_action()
        elif event.type == pygame.KEYDOWN:
            key = event.key
            if key == pygame.K_q:
                self.running = False
            elif key == pygame.K_SPACE:
                self.primary_action()
            elif key == pygame.K_RETURN and s.phase in (IDLE, ENDED):
                s.start()
            elif key == pygame.K_ESCAPE:
                s.toggle_pause()
            elif key == pygame.K_m:
                self.show('menu')
            elif key == pygame.K_s:
                self.show('settings')
            elif key == pygame.K_h:
                self.show('highscore')
            elif self.screen_name == 'settings':
                self.handle_settings_key(key)

    def handle_settings_key(self, key):
        s = self.session
        if key == pygame.K_d:
            s.select_difficulty(next_difficulty(s.difficulty, s.config.presets))
        elif key == pygame.K_RIGHT:
            s.next_track()
        elif key == pygame.K_LEFT:
            s.prev_track()
        elif key == pygame.K_UP:
            s.set_volume(s.volume + VOLUME_STEP)
        elif key == pygame.K_DOWN:
            s.set_volume(s.volume - VOLUME_STEP)

    def run(self, clock):
        loop = FrameLoop(self.session.step, fps=FPS)
        while self.running:
            clock.tick(FPS)
            for event in pygame.event.get():
                self.handle_event(event)
            loop.advance()
            self.renderer.draw(self.session, self.screen_name)
            pygame.display.flip()


def main():
    settings = load_settings()
    setup_logging(settings.log_level, settings.log_file)

    pygame.mixer.pre_init(44100, -16, 2, 512)
    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption('Flappy Flame')

    store = JsonStore(settings.save_file)
    audio = SoundBoard(music_dir=settings.music_dir)
    session = Session(store=store, audio=audio)
    log.info("loaded %s: high=%d games=%d", settings.save_file, session.high_score, session.games_played)

    app = App(session, Renderer(screen))
    try:
        app.run(pygame.time.Clock())
    finally:
        audio.stop_track()
        pygame.quit()
    sys.exit()


if __name__ == '__main__':
    main()
