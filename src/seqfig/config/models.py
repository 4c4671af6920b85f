"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, seqfig.toml only contains overrides.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field


class RenderConfig(BaseModel):
    """[render] section."""

    model_config = {"frozen": True}

    options: str = ""
    label_prefix: str = "fig:"
    line_height: float = Field(default=1.5, gt=0)
    size: str = "small"


class TemplatesConfig(BaseModel):
    """[templates] section."""

    model_config = {"frozen": True}

    directory: Path | None = None

