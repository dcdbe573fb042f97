"""Interactive Galton board built on pygame and pymunk."""
from plinko.config import BoardConfig, ConfigError
from plinko.controller import BoardController
from plinko.layout import BoardGeometry, generate_layout
from plinko.palette import ColorPalette

__version__ = "0.1.0"

__all__ = [
    "BoardConfig",
    "BoardController",
    "BoardGeometry",
    "ColorPalette",
    "ConfigError",
    "generate_layout",
]
