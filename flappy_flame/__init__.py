"""Flappy Flame: a bird, some fire pipes, and gravity."""

__version__ = '1.0.0'
