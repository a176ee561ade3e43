"""Application configuration: settings schema and mdtypst.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "mdtypst.yaml"


class Settings(BaseModel):
    app_name:      str = "mdtypst"
    parser_config: str = Field(
        default="commonmark",
        pattern="^(commonmark|default|zero|js-default|gfm-like)$",
        description="MarkdownIt parser preset name",
    )
    log_level:     str = Field(
        default="WARNING",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
        description="Logging level for diagnostics on stderr",
    )


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from mdtypst.yaml, then MDTYPST_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"MDTYPST_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
