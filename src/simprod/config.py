from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


DEFAULT_ID_MAX_LENGTH = 32
DEFAULT_MAX_NUM_ZONES = 256
DEFAULT_MAX_NUM_PLANTS = 256
DEFAULT_MAX_NUM_LINKS = 256


class Limits(BaseModel):
    """Capacity limits applied to scenario collections and identifiers."""

    id_max_length: int = Field(
        DEFAULT_ID_MAX_LENGTH, ge=1, description="Maximum length of zone/plant/link identifiers."
    )
    max_num_zones: int = Field(DEFAULT_MAX_NUM_ZONES, ge=0, description="Maximum number of zones in a scenario.")
    max_num_plants: int = Field(DEFAULT_MAX_NUM_PLANTS, ge=0, description="Maximum number of plants in a scenario.")
    max_num_links: int = Field(DEFAULT_MAX_NUM_LINKS, ge=0, description="Maximum number of links in a scenario.")

    model_config = ConfigDict(extra="forbid", frozen=True)


DEFAULT_LIMITS = Limits()


def load_limits(path: Optional[str]) -> Limits:
    """
    Load limits from a JSON file.

    Args:
        path: Path to a JSON object with any subset of the Limits fields.
              If None, the defaults are returned.

    Returns:
        Validated Limits

    Raises:
        FileNotFoundError: if the file does not exist
        pydantic.ValidationError: if the content does not match the model
    """
    if path is None:
        return DEFAULT_LIMITS
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    return Limits.model_validate(json.loads(p.read_text()))
