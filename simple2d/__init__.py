"""Processing-style 2D shapes, drawing, input, images and a game loop on pygame."""

__version__ = "0.1.0"