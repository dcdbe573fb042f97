from dataclasses import dataclass

from plinko.config import NEUTRAL_COLOR_INDEX, PALETTE, ConfigError


@dataclass(frozen=True)
class ColorPalette:
    """Fixed, ordered display colors indexed cyclically."""

    colors: tuple = PALETTE
    neutral_index: int = NEUTRAL_COLOR_INDEX

    def __post_init__(self):
        if not self.colors:
            raise ConfigError("palette needs at least one color")
        if not 0 <= self.neutral_index < len(self.colors):
            raise ConfigError(f"neutral index {self.neutral_index} outside palette")

    def __len__(self):
        return len(self.colors)

    def next_index(self, index):
        return (index + 1) % len(self.colors)

    def color(self, index):
        return self.colors[index % len(self.colors)]

    @property
    def neutral(self):
        return self.colors[self.neutral_index]
