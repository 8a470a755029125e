"""pipeline.config

Run configuration: optional YAML file + environment overrides.

Precedence (highest first):

1. environment variables (``ERRORBOOK_*``; a ``.env`` file is loaded into the
   environment by :mod:`pipeline.wiring` beforehand)
2. ``errorbook.yaml`` in the working directory, or the file named by
   ``ERRORBOOK_CONFIG``
3. built-in defaults

Example ``errorbook.yaml``::

  output_root: target
  open_browser: false
  book:
    title: "Our lint debt"
    authors: ["platform team"]
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from pipeline.book.model import BookSettings
from tools.cargo.stream import MAX_STREAM_BYTES

CONFIG_ENV = "ERRORBOOK_CONFIG"
DEFAULT_CONFIG_NAME = "errorbook.yaml"

ENV_OUTPUT_ROOT = "ERRORBOOK_OUTPUT_ROOT"
ENV_MAX_STREAM_BYTES = "ERRORBOOK_MAX_STREAM_BYTES"
ENV_OPEN_BROWSER = "ERRORBOOK_OPEN_BROWSER"
ENV_MDBOOK = "ERRORBOOK_MDBOOK"
ENV_LOG_LEVEL = "ERRORBOOK_LOG_LEVEL"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class ErrorbookConfig:
    output_root: Path = Path("target")
    max_stream_bytes: int = MAX_STREAM_BYTES
    open_browser: bool = True
    mdbook_bin: str = "mdbook"
    log_level: str = "WARNING"
    book: BookSettings = field(default_factory=BookSettings)


def parse_bool(raw: Any, *, name: str) -> bool:
    if isinstance(raw, bool):
        return raw
    s = str(raw).strip().lower()
    if s in _TRUE:
        return True
    if s in _FALSE:
        return False
    raise ValueError(f"{name}: expected a boolean, got {raw!r}")


def parse_positive_int(raw: Any, *, name: str) -> int:
    if isinstance(raw, bool):
        raise ValueError(f"{name}: expected a positive integer, got {raw!r}")
    try:
        n = int(raw)
    except (TypeError, ValueError) as e:
        raise ValueError(f"{name}: expected a positive integer, got {raw!r}") from e
    if n <= 0:
        raise ValueError(f"{name}: expected a positive integer, got {raw!r}")
    return n


def _book_settings(raw: Any) -> BookSettings:
    if raw is None:
        return BookSettings()
    if not isinstance(raw, Mapping):
        raise ValueError(f"book: expected a mapping, got {type(raw).__name__}")

    known = {f.name for f in fields(BookSettings)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ValueError(f"book: unknown keys {unknown}")

    kwargs: Dict[str, Any] = {k: str(v) for k, v in raw.items() if k != "authors"}
    if "authors" in raw:
        authors = raw["authors"]
        if isinstance(authors, str):
            authors = [authors]
        if not isinstance(authors, list):
            raise ValueError("book.authors: expected a list of names")
        kwargs["authors"] = tuple(str(a) for a in authors)
    return BookSettings(**kwargs)


def load_config_yaml(path: Path) -> Dict[str, Any]:
    """Load the YAML config file; a missing file is an error."""
    import yaml

    p = Path(path).expanduser()
    if not p.exists():
        raise FileNotFoundError(f"Config file not found: {p}")
    raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"Config YAML must be a mapping/object at top level: {p}")
    return raw


def _config_path(env: Mapping[str, str], cwd: Path) -> Optional[Path]:
    explicit = env.get(CONFIG_ENV)
    if explicit:
        return Path(explicit)
    default = cwd / DEFAULT_CONFIG_NAME
    return default if default.exists() else None


def _pick(env: Mapping[str, str], env_key: str, raw: Mapping[str, Any], raw_key: str, default: Any) -> Any:
    """Environment wins over YAML; an empty environment value counts as unset."""
    v = env.get(env_key)
    if v is not None and v != "":
        return v
    v = raw.get(raw_key)
    return default if v is None else v


def config_from_mapping(raw: Mapping[str, Any], env: Mapping[str, str]) -> ErrorbookConfig:
    known = {f.name for f in fields(ErrorbookConfig)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ValueError(f"Unknown config keys: {unknown}")

    defaults = ErrorbookConfig()
    return ErrorbookConfig(
        output_root=Path(_pick(env, ENV_OUTPUT_ROOT, raw, "output_root", defaults.output_root)),
        max_stream_bytes=parse_positive_int(
            _pick(env, ENV_MAX_STREAM_BYTES, raw, "max_stream_bytes", defaults.max_stream_bytes),
            name="max_stream_bytes",
        ),
        open_browser=parse_bool(
            _pick(env, ENV_OPEN_BROWSER, raw, "open_browser", defaults.open_browser),
            name="open_browser",
        ),
        mdbook_bin=str(_pick(env, ENV_MDBOOK, raw, "mdbook_bin", defaults.mdbook_bin)),
        log_level=str(_pick(env, ENV_LOG_LEVEL, raw, "log_level", defaults.log_level)).upper(),
        book=_book_settings(raw.get("book")),
    )


def load_config(*, env: Optional[Mapping[str, str]] = None, cwd: Optional[Path] = None) -> ErrorbookConfig:
    env = os.environ if env is None else env
    cwd = Path.cwd() if cwd is None else cwd

    path = _config_path(env, cwd)
    raw = load_config_yaml(path) if path is not None else {}
    return config_from_mapping(raw, env)
