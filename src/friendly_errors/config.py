"""TOML config loading for friendly.toml."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from friendly_errors.diagnostic import HEADER_WIDTH

logger = logging.getLogger(__name__)

CONFIG_NAME = "friendly.toml"


class ColorMode(Enum):
    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"

    def enabled(self, is_tty: bool) -> bool:
        if self is ColorMode.AUTO:
            return is_tty
        return self is ColorMode.ALWAYS


@dataclass
class RenderConfig:
    color: ColorMode = ColorMode.AUTO
    header_width: int = HEADER_WIDTH


@dataclass
class FriendlyConfig:
    render: RenderConfig = field(default_factory=RenderConfig)


def find_config(start_path: Path | None = None, name: str = CONFIG_NAME) -> Path:
    """Return the nearest *name* in *start_path* or one of its parents.

    Raises FileNotFoundError when no directory up to the root holds one.
    """
    start = (start_path or Path.cwd()).resolve()
    if start.is_file():
        start = start.parent
    for directory in (start, *start.parents):
        candidate = directory / name
        if candidate.is_file():
            return candidate
    raise FileNotFoundError(f"no {name} in {start} or any parent directory")


def load_config(path: Path) -> FriendlyConfig:
    """Parse a friendly.toml file into a FriendlyConfig."""
    with open(path, "rb") as f:
        data = tomllib.load(f)

    config = FriendlyConfig()

    if "render" in data:
        rnd = data["render"]
        mode = rnd.get("color", ColorMode.AUTO.value)
        try:
            color = ColorMode(mode)
        except ValueError:
            raise ValueError(
                f"{path}: render.color must be one of auto, always, never (got {mode!r})"
            ) from None
        width = rnd.get("header_width", HEADER_WIDTH)
        if isinstance(width, bool) or not isinstance(width, int) or width < 1:
            raise ValueError(
                f"{path}: render.header_width must be a positive integer (got {width!r})"
            )
        config.render = RenderConfig(color=color, header_width=width)

    logger.debug("loaded config from %s: %s", path, config)
    return config


def discover_config(start_path: Path | None = None) -> FriendlyConfig:
    """Load the nearest friendly.toml, or the defaults when there is none."""
    try:
        return load_config(find_config(start_path))
    except FileNotFoundError:
        return FriendlyConfig()
