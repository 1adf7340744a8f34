"""
Per-tag display configuration
"""

from dataclasses import dataclass
from typing import Dict

from litelog.core import ansi


@dataclass
class TagConfig:
    """
    Display attributes of a tag.

    Attributes:
        color: Color name ("cyan", "red", ...) or raw ANSI escape
        style: Style name ("bold", "") or raw ANSI escape
        enabled: When False, every message carrying the tag is suppressed
    """

    color: str = "cyan"
    style: str = ""
    enabled: bool = True

    def __post_init__(self):
        """Validate color and style names."""
        ansi.color_code(self.color)
        ansi.style_code(self.style)

    @property
    def color_code(self) -> str:
        """ANSI escape for the tag color."""
        return ansi.color_code(self.color)

    @property
    def style_code(self) -> str:
        """ANSI escape for the tag style."""
        return ansi.style_code(self.style)


# Conventional tags configured on every new logger
DEFAULT_TAG_COLORS: Dict[str, str] = {
    "NETWORK": "blue",
    "DATABASE": "magenta",
    "UI": "green",
    "SYSTEM": "yellow",
    "SECURITY": "red",
}


def default_tag_configs() -> Dict[str, TagConfig]:
    """Fresh TagConfig mapping for the conventional tags."""
    return {tag: TagConfig(color=color) for tag, color in DEFAULT_TAG_COLORS.items()}
