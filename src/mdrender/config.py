"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError

from mdrender.core.models import ParseOptions, Typography


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "MDRENDER_"
NESTED_FIELDS = {"typography"}      # config.yaml only; no env var mapping


class Settings(BaseModel):
    app_name:         str = "mdrender"
    enable_math:      bool = Field(default=True,  description="Typeset $...$ and $$...$$ math")
    enable_chemistry: bool = Field(default=True,  description="Trust chemistry commands inside math")
    enable_highlight: bool = Field(default=True,  description="Highlight fenced code with a language tag")
    standalone:       bool = Field(default=False, description="Wrap output in a full HTML document")
    output_dir:       str = Field(default="dist", description="Directory for rendered HTML files")
    log_level:        str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    typography:       Typography = Field(default_factory=Typography)

    def parse_options(self) -> ParseOptions:
        """Options for the core parse() call."""
        return ParseOptions(
            enable_math=self.enable_math,
            enable_chemistry=self.enable_chemistry,
            enable_highlight=self.enable_highlight,
            typography=self.typography,
        )


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then MDRENDER_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if name in NESTED_FIELDS:
            continue
        if val := os.getenv(f"{ENV_PREFIX}{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return Settings(**data)
    except ValidationError as e:
        raise ValueError(f"Invalid settings: {e}") from e
