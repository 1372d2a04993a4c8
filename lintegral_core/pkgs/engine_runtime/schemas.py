"""Pydantic schemas for engine configuration."""

from typing import Literal

from pydantic import BaseModel, Field


class EngineConfig(BaseModel):
    """Settings for an ``IntegralEngine``."""
    enumeration: Literal["calkin_wilf", "natural", "dyadic"] = "calkin_wilf"
    max_steps: int = Field(4096, ge=0)
    strict: bool = False
    nonmeasurable_policy: Literal["raise", "zero"] = "raise"
    tsum_max_terms: int = Field(1000, ge=1)
    log_level: str = "INFO"
    configure_logging: bool = False
