"""Application configuration: settings schema and postmatter.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator


CONFIG_FILE = "postmatter.yaml"

RECOGNIZED_FIELDS = [
    "layout", "title", "date", "description", "categories", "comments",
    "tags", "permalink", "published", "excerpt", "author", "slug",
]


class Settings(BaseModel):
    required_fields:    list[str] = Field(default=["layout", "title"], min_length=1, description="Fields every post must define")
    recommended_fields: list[str] = Field(default=["date", "description", "categories"], description="Fields whose absence is a warning")
    recognized_fields:  list[str] = Field(default=RECOGNIZED_FIELDS, description="Known keys; others are a warning")
    extensions:         list[str] = Field(default=[".md", ".markdown", ".mdx", ".html"], description="Post file suffixes")
    parser_config:      str  = Field(default="commonmark", description="MarkdownIt parser preset name")
    strict:             bool = Field(default=False, description="Treat warnings as failures")

    @field_validator("required_fields", "recommended_fields", "recognized_fields", "extensions", mode="before")
    @classmethod
    def _split_csv(cls, value: Any) -> Any:
        """Accept comma-separated strings (env vars) for list fields."""
        if isinstance(value, str):
            return [v.strip() for v in value.split(",") if v.strip()]
        return value


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from postmatter.yaml, then POSTMATTER_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"POSTMATTER_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
