"""Validator configuration."""
from __future__ import annotations

import json
from typing import Optional

import yaml
from pydantic import BaseModel, Field

DEFAULT_MAX_STEP: int = 3


class ValidatorConfig(BaseModel):
    """Parameters of the report safety rule."""

    max_step: int = Field(DEFAULT_MAX_STEP, ge=1, description="Largest allowed absolute step between adjacent levels")
    dampener: bool = Field(True, description="Tolerate a single removed level per report")


def load_config(path: Optional[str] = None) -> ValidatorConfig:
    if path is None:
        return ValidatorConfig()
    with open(path, "r", encoding="utf-8") as handle:
        if str(path).endswith(".json"):
            payload = json.load(handle)
        else:
            payload = yaml.safe_load(handle)
    return ValidatorConfig(**(payload or {}))


__all__ = ["DEFAULT_MAX_STEP", "ValidatorConfig", "load_config"]
