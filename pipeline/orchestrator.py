"""pipeline.orchestrator

High-level orchestration entrypoint for one error book run::

  cargo --message-format json -> stream -> diagnostics -> groups
        -> document tree -> files -> mdbook build -> browser

Design principles
-----------------
- Keep the CLI thin: parse args + build a request + call :func:`run_errorbook`.
- Everything is computed in memory before the first file is written.
- Fail fast: every collaborator error propagates; nothing is retried.

The external collaborators (command runner, renderer, viewer) are parameters
so tests can replace them without spawning processes.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from errorbook.io import get_book_paths
from pipeline.book import build_document_tree, write_document_tree
from pipeline.grouping import DiagnosticCollector, group_diagnostics
from pipeline.models import RunRequest
from tools.cargo import CommandRunner, build_cargo_command, capture_cargo, collect_diagnostics
from tools.mdbook import build_book
from tools.viewer import open_in_browser

logger = logging.getLogger(__name__)

Renderer = Callable[..., None]
Viewer = Callable[[Path], str]


def run_errorbook(
    req: RunRequest,
    *,
    runner: CommandRunner = capture_cargo,
    renderer: Renderer = build_book,
    viewer: Viewer = open_in_browser,
) -> int:
    cfg = req.config
    cmd = build_cargo_command(req.cargo_bin, req.cargo_args)
    print(f"🚀 running {' '.join(cmd)}")

    collector = DiagnosticCollector()
    collector.extend(collect_diagnostics(cmd, max_stream_bytes=cfg.max_stream_bytes, runner=runner))
    logger.debug("collected %d diagnostics", len(collector))

    result = group_diagnostics(collector)
    print(f"Found {result.component_count} improvement points.")
    if result.is_empty:
        return 0

    tree = build_document_tree(result, settings=cfg.book)
    paths = get_book_paths(cfg.output_root)
    written = write_document_tree(tree, paths)
    print(f"📂 Wrote {len(written)} files to {paths.book_dir}")

    renderer(paths.book_dir, mdbook_bin=cfg.mdbook_bin)

    if cfg.open_browser:
        url = viewer(paths.html_index)
        print(f"✅ Opened {url}")
    else:
        print(f"✅ Book ready: {paths.html_index}")
    return 0
