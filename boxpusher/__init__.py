"""Box-pushing puzzle building blocks: tile attributes, glyphs, deadlock detection, joystick, playfield and menu."""

__version__ = "0.1.0"