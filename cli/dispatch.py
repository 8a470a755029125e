from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Optional

from cli.args.base import split_argv
from cli.common import EXIT_USAGE, print_usage
from errorbook.errors import ErrorbookError
from pipeline.config import ErrorbookConfig
from pipeline.models import RunRequest
from pipeline.pipeline import ErrorBookPipeline
from tools.cargo import resolve_cargo_bin

logger = logging.getLogger(__name__)


def dispatch(
    argv: Sequence[str],
    pipeline: ErrorBookPipeline,
    *,
    config: ErrorbookConfig,
    cargo_bin: Optional[str] = None,
) -> int:
    """Run one error book build for ``argv`` (program path excluded).

    Unrecoverable failures surface as ``SystemExit`` naming the failing step.
    """
    split = split_argv(argv)
    if split is None:
        print_usage()
        return EXIT_USAGE
    name, cargo_args = split
    logger.debug("invoked as %r with cargo args %r", name, cargo_args)

    try:
        req = RunRequest(
            cargo_bin=cargo_bin or resolve_cargo_bin(),
            cargo_args=tuple(cargo_args),
            config=config,
        )
        return int(pipeline.run(req))
    except ErrorbookError as e:
        raise SystemExit(f"[{e.step}] {e}") from e
    except FileNotFoundError as e:
        raise SystemExit(f"[run] {e}") from e
