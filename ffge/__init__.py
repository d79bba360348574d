"""Free Fighting Game Engine: players, enemies, editor, input, rendering and game loop."""

__version__ = "0.1.0"