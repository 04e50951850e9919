# === FILE: link_crawler/config.py ===
"""
Loading and validation of the LinkCrawler configuration.
Pydantic describes the schema and checks the data.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Dict, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator


class CrawlerConfig(BaseModel):
    """Settings for a single crawl run."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    connect_timeout: float = Field(5.0, gt=0, description="Connect timeout per request (seconds).")
    read_timeout: float = Field(5.0, gt=0, description="Read timeout per request (seconds).")
    user_agent: str = Field("Mozilla/5.0", min_length=1, description="User-Agent header.")
    max_retries: int = Field(5, ge=1, description="Total fetch attempts on timeouts.")
    backoff_unit: float = Field(1.0, ge=0, description="Base delay of the exponential backoff (seconds).")
    join_timeout: float = Field(60.0, gt=0, description="How long a page waits for each child branch.")
    shutdown_grace: float = Field(10.0, ge=0, description="Grace period for in-flight work on shutdown.")
    max_concurrency: int = Field(32, ge=1, description="Maximum number of simultaneous fetches.")
    debug: bool = Field(False, description="Enable fetch-timing and failure diagnostics.")

    @field_validator("user_agent", mode="before")
    def _strip_user_agent(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip()
        return v


DEFAULT_CFG = Path("configs/default.yaml")


def _read_yaml(path: Path) -> Dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of YAML must be a mapping, got {type(data).__name__}")
    return data


def _read_json(path: Path) -> Dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of JSON must be a mapping, got {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None] = None) -> CrawlerConfig:
    """
    Read YAML or JSON and return a validated CrawlerConfig.

    Without *path* the default ``configs/default.yaml`` is used when present,
    otherwise the built-in defaults. An explicit missing file raises
    FileNotFoundError.
    """
    if path is None:
        if not DEFAULT_CFG.is_file():
            return CrawlerConfig()
        path_obj = DEFAULT_CFG
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Unsupported config format: {suffix}")

    return CrawlerConfig(**data)


__all__ = ["CrawlerConfig", "load_config", "DEFAULT_CFG"]
