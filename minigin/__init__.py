"""A component-based 2D game engine on pygame with scenes, input, sound and resources."""

__version__ = "0.1.0"