from __future__ import annotations

from pathlib import Path

import pytest

from pipeline.book import BookSettings
from pipeline.config import ErrorbookConfig, load_config
from tools.cargo.stream import MAX_STREAM_BYTES


def _write_yaml(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults_without_file_or_env(tmp_path: Path) -> None:
    cfg = load_config(env={}, cwd=tmp_path)

    assert cfg == ErrorbookConfig()
    assert cfg.output_root == Path("target")
    assert cfg.max_stream_bytes == MAX_STREAM_BYTES == 10_000_000
    assert cfg.open_browser is True
    assert cfg.book == BookSettings()


def test_yaml_in_working_directory_is_picked_up(tmp_path: Path) -> None:
    _write_yaml(
        tmp_path / "errorbook.yaml",
        "output_root: build/out\n"
        "open_browser: false\n"
        "max_stream_bytes: 2048\n"
        "log_level: debug\n"
        "book:\n"
        "  title: Lint debt\n"
        "  authors: platform team\n",
    )

    cfg = load_config(env={}, cwd=tmp_path)

    assert cfg.output_root == Path("build/out")
    assert cfg.open_browser is False
    assert cfg.max_stream_bytes == 2048
    assert cfg.log_level == "DEBUG"
    assert cfg.book.title == "Lint debt"
    assert cfg.book.authors == ("platform team",)
    assert cfg.book.language == "en"


def test_environment_wins_over_yaml(tmp_path: Path) -> None:
    cfg_file = _write_yaml(tmp_path / "custom.yaml", "output_root: from-yaml\nopen_browser: true\nmdbook_bin: mdbook\n")
    env = {
        "ERRORBOOK_CONFIG": str(cfg_file),
        "ERRORBOOK_OUTPUT_ROOT": "from-env",
        "ERRORBOOK_OPEN_BROWSER": "no",
        "ERRORBOOK_MDBOOK": "/opt/mdbook",
        "ERRORBOOK_MAX_STREAM_BYTES": "",
    }

    cfg = load_config(env=env, cwd=tmp_path)

    assert cfg.output_root == Path("from-env")
    assert cfg.open_browser is False
    assert cfg.mdbook_bin == "/opt/mdbook"
    assert cfg.max_stream_bytes == MAX_STREAM_BYTES


def test_explicit_missing_config_file_is_an_error(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(env={"ERRORBOOK_CONFIG": str(tmp_path / "nope.yaml")}, cwd=tmp_path)


@pytest.mark.parametrize(
    "text",
    [
        "- just\n- a list\n",
        "surprise: 1\n",
        "open_browser: maybe\n",
        "max_stream_bytes: 0\n",
        "book: [1, 2]\n",
        "book:\n  subtitle: x\n",
    ],
)
def test_invalid_yaml_values_raise_value_error(tmp_path: Path, text: str) -> None:
    _write_yaml(tmp_path / "errorbook.yaml", text)
    with pytest.raises(ValueError):
        load_config(env={}, cwd=tmp_path)


def test_invalid_env_value_raises(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        load_config(env={"ERRORBOOK_MAX_STREAM_BYTES": "ten"}, cwd=tmp_path)
