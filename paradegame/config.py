"""Runtime configuration for a Parade game."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Mapping

from pydantic import BaseModel, Field, ValidationError

from .cards import DEFAULT_CARDS_PER_COLOUR

logger = logging.getLogger(__name__)

DEFAULT_PARADE_SIZE = 6
DEFAULT_HAND_SIZE = 5

# Field name -> (properties-file key, snake_case alias).
_PROPERTY_KEYS = {
    "parade_size": ("initialParadeSize", "parade_size"),
    "hand_size": ("initialHandSize", "hand_size"),
    "cards_per_colour": ("cardsPerColor", "cards_per_colour"),
    "use_colour": ("useAnsiColors", "use_colour"),
}
_SEPARATOR = re.compile(r"\s*[=:]\s*")


class ParadeConfig(BaseModel):
    """Table setup values consumed when the deck and parade are built."""

    parade_size: int = Field(
        default=DEFAULT_PARADE_SIZE,
        gt=0,
        description="Cards dealt face up into the parade before the first turn",
    )
    hand_size: int = Field(
        default=DEFAULT_HAND_SIZE,
        gt=0,
        description="Cards dealt to each player",
    )
    cards_per_colour: int = Field(
        default=DEFAULT_CARDS_PER_COLOUR,
        gt=0,
        description="Cards of each colour, valued 0 upwards",
    )
    use_colour: bool = Field(default=True, description="Colour card labels on the console")

    def with_overrides(
        self,
        *,
        parade_size: int | None = None,
        hand_size: int | None = None,
        cards_per_colour: int | None = None,
        use_colour: bool | None = None,
    ) -> "ParadeConfig":
        """Return a validated copy with every non-``None`` override applied."""

        overrides = {
            "parade_size": parade_size,
            "hand_size": hand_size,
            "cards_per_colour": cards_per_colour,
            "use_colour": use_colour,
        }
        merged = self.model_dump()
        merged.update({key: value for key, value in overrides.items() if value is not None})
        return ParadeConfig.model_validate(merged)


def config_from_mapping(values: Mapping[str, object]) -> ParadeConfig:
    """Build a config from property-style keys.

    Every value that fails validation is dropped with a warning, so that
    field keeps its default while the valid ones still apply.
    """

    raw: dict[str, object] = {}
    for field_name, (property_key, alias) in _PROPERTY_KEYS.items():
        value = values.get(property_key, values.get(alias))
        if value is not None:
            raw[field_name] = value
    try:
        return ParadeConfig.model_validate(raw)
    except ValidationError as exc:
        for error in exc.errors():
            field_name = str(error["loc"][0])
            logger.warning(
                "Ignoring invalid value %r for %s (%s); using the default",
                error.get("input"),
                _PROPERTY_KEYS[field_name][0],
                error["msg"],
            )
            raw.pop(field_name, None)
    return ParadeConfig.model_validate(raw)


def parse_properties(text: str) -> dict[str, str]:
    """Parse ``key=value`` or ``key:value`` lines; ``#`` and ``!`` start comments.

    The first separator on a line ends the key, so values may contain either.
    """

    values: dict[str, str] = {}
    for line in text.splitlines():
        stripped = line.strip()
        if not stripped or stripped[0] in "#!":
            continue
        parts = _SEPARATOR.split(stripped, maxsplit=1)
        if len(parts) == 2:
            values[parts[0]] = parts[1]
    return values


def load_config(path: str | Path | None) -> ParadeConfig:
    """Load ``path`` as a properties file; an unreadable file yields the defaults."""

    if path is None:
        return ParadeConfig()
    config_path = Path(path)
    try:
        text = config_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Could not read config file %s (%s), using defaults", config_path, exc)
        return ParadeConfig()
    return config_from_mapping(parse_properties(text))
