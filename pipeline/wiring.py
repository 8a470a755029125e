"""pipeline.wiring

Composition root for the Python runtime: the single place where the running
application is assembled.

- load ``.env`` (python-dotenv) and the YAML/env configuration
- configure logging
- build the pipeline facade
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from pipeline.config import ErrorbookConfig, load_config
from pipeline.pipeline import ErrorBookPipeline

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "WARNING") -> None:
    """Configure root logging once. Unknown level names raise ``ValueError``."""
    numeric = logging.getLevelName(str(level).upper())
    if not isinstance(numeric, int):
        raise ValueError(f"log_level: unknown level {level!r}")
    logging.basicConfig(level=numeric, format=LOG_FORMAT)


def load_runtime_config(*, dotenv_path: Optional[Path] = None) -> ErrorbookConfig:
    # Never overrides variables already exported in the shell.
    load_dotenv(dotenv_path or Path.cwd() / ".env", override=False)
    cfg = load_config()
    configure_logging(cfg.log_level)
    return cfg


def build_pipeline() -> ErrorBookPipeline:
    return ErrorBookPipeline()
