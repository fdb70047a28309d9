"""Logging for the game: a short console line, optionally a play log file."""

import logging
import sys

CONSOLE_FORMAT = '%(asctime)s %(levelname).1s %(name)s: %(message)s'
FILE_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'


class ConsoleFormatter(logging.Formatter):
    """Drops the ``flappy.`` prefix; warnings and errors in yellow/red on a tty."""

    WARN, ERR, RESET = '\033[33m', '\033[31m', '\033[0m'

    def __init__(self, color=False):
        super().__init__(CONSOLE_FORMAT, datefmt='%H:%M:%S')
        self.color = color

    def format(self, record):
        short = logging.makeLogRecord(record.__dict__)
        short.name = record.name.replace('flappy.', '', 1)
        line = super().format(short)
        if self.color and record.levelno >= logging.WARNING:
            line = (self.ERR if record.levelno >= logging.ERROR else self.WARN) + line + self.RESET
        return line


def setup_logging(level='info', log_file=None):
    root = logging.getLogger('flappy')
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(ConsoleFormatter(color=sys.stderr.isatty()))
    root.addHandler(console)

    # session starts/ends and collaborator failures, kept across runs
    if log_file:
        fh = logging.FileHandler(log_file, encoding='utf-8')
        fh.setFormatter(logging.Formatter(FILE_FORMAT))
        root.addHandler(fh)


def get_logger(name):
    return logging.getLogger(f'flappy.{name}')
