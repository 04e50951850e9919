# File: tests/test_config.py
import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from link_crawler.config import CrawlerConfig, load_config


def write_file(tmp_path: Path, content: str, suffix: str) -> Path:
    path = tmp_path / f"config{suffix}"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.mark.parametrize(
    "content,suffix,expect_exc",
    [
        ("join_timeout: 30\nmax_retries: 2", ".yaml", None),
        (json.dumps({"join_timeout": 30, "max_retries": 2}), ".json", None),
        ("max_retries: 0", ".yaml", ValidationError),
        ("unknown_option: 1", ".yml", ValidationError),
        ("key: [unclosed", ".yaml", ValueError),
        ("- a\n- b", ".yaml", TypeError),
        ("{not json", ".json", ValueError),
        ("[1, 2]", ".json", TypeError),
        ("join_timeout = 30", ".toml", ValueError),
    ],
)
def test_load_config_variants(tmp_path, content, suffix, expect_exc):
    cfg_path = write_file(tmp_path, content, suffix)
    if expect_exc:
        with pytest.raises(expect_exc):
            load_config(cfg_path)
    else:
        cfg = load_config(cfg_path)
        assert isinstance(cfg, CrawlerConfig)
        assert cfg.join_timeout == 30
        assert cfg.max_retries == 2
        assert cfg.read_timeout == 5.0


def test_defaults_match_crawl_policy():
    cfg = CrawlerConfig()
    assert cfg.max_retries == 5
    assert cfg.backoff_unit == 1.0
    assert cfg.connect_timeout == cfg.read_timeout == 5.0
    assert cfg.join_timeout == 60.0
    assert cfg.shutdown_grace == 10.0
    assert cfg.debug is False


def test_default_file_missing_falls_back_to_defaults(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert load_config(None) == CrawlerConfig()


def test_default_file_is_used_when_present(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "default.yaml").write_text("debug: true\n", encoding="utf-8")
    assert load_config(None).debug is True


def test_explicit_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


def test_config_is_frozen():
    cfg = CrawlerConfig()
    with pytest.raises(ValidationError):
        cfg.join_timeout = 1.0
    assert cfg.model_copy(update={"join_timeout": 1.0}).join_timeout == 1.0
