from __future__ import annotations

import io
import sys
from pathlib import Path
from typing import List, Optional

import pytest

import cargo_errorbook
from cli.args.base import split_argv
from cli.common import print_usage
from cli.dispatch import dispatch
from errorbook.errors import BookBuildError, RendererError
from pipeline.config import ErrorbookConfig
from pipeline.models import RunRequest
from pipeline.pipeline import ErrorBookPipeline


class RecordingPipeline(ErrorBookPipeline):
    def __init__(self, exc: Optional[Exception] = None) -> None:
        super().__init__()
        self.requests: List[RunRequest] = []
        self._exc = exc

    def run(self, req: RunRequest) -> int:
        self.requests.append(req)
        if self._exc is not None:
            raise self._exc
        return 0


@pytest.mark.parametrize("argv", [[], ["errorbook"]])
def test_too_few_tokens_prints_usage_and_runs_nothing(argv, capsys) -> None:
    pipeline = RecordingPipeline()

    code = dispatch(argv, pipeline, config=ErrorbookConfig(), cargo_bin="cargo")

    assert code == 1
    assert pipeline.requests == []
    out = capsys.readouterr().out
    assert "To Errorbook:" in out
    assert "cargo errorbook clippy" in out


def test_arguments_after_the_name_are_forwarded_verbatim() -> None:
    pipeline = RecordingPipeline()
    cfg = ErrorbookConfig(open_browser=False)

    code = dispatch(["errorbook", "clippy", "--all-targets", "--", "-D", "warnings"], pipeline, config=cfg, cargo_bin="/bin/cargo")

    assert code == 0
    (req,) = pipeline.requests
    assert req.cargo_bin == "/bin/cargo"
    assert req.cargo_args == ("clippy", "--all-targets", "--", "-D", "warnings")
    assert req.config is cfg


def test_help_flag_belongs_to_cargo() -> None:
    assert split_argv(["errorbook", "check", "-h"]) == ("errorbook", ["check", "-h"])
    assert split_argv(["errorbook"]) is None


def test_leading_dash_in_name_token_is_not_an_option() -> None:
    assert split_argv(["-x", "check"]) == ("-x", ["check"])


def test_usage_follows_redirected_stdout(monkeypatch) -> None:
    buf = io.StringIO()
    monkeypatch.setattr(sys, "stdout", buf)

    print_usage()

    assert buf.getvalue().startswith("To Errorbook:\n")


def test_cargo_bin_comes_from_cargo_env(monkeypatch) -> None:
    monkeypatch.setenv("CARGO", "/custom/cargo")
    pipeline = RecordingPipeline()

    dispatch(["errorbook", "check"], pipeline, config=ErrorbookConfig())

    assert pipeline.requests[0].cargo_bin == "/custom/cargo"


def test_pipeline_failure_exits_naming_the_step() -> None:
    pipeline = RecordingPipeline(exc=RendererError("mdbook build exited with 1. Maybe `cargo install mdbook`?"))

    with pytest.raises(SystemExit) as exc:
        dispatch(["errorbook", "check"], pipeline, config=ErrorbookConfig(), cargo_bin="cargo")

    assert str(exc.value.code).startswith("[render] ")
    assert "cargo install mdbook" in str(exc.value.code)


def test_main_usage_error_before_any_subprocess(tmp_path: Path, monkeypatch, capsys) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("ERRORBOOK_CONFIG", raising=False)

    assert cargo_errorbook.main(["errorbook"]) == 1
    assert "To Errorbook:" in capsys.readouterr().out


def test_main_reports_bad_config(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("ERRORBOOK_CONFIG", raising=False)
    (tmp_path / "errorbook.yaml").write_text("open_browser: sometimes\n", encoding="utf-8")

    with pytest.raises(SystemExit) as exc:
        cargo_errorbook.main(["errorbook", "check"])
    assert str(exc.value.code).startswith("[config] ")


def test_page_name_collision_exits_naming_the_build_step() -> None:
    pipeline = RecordingPipeline(exc=BookBuildError("Page file name collision 'a_1_0_0.md'"))

    with pytest.raises(SystemExit) as exc:
        dispatch(["errorbook", "check"], pipeline, config=ErrorbookConfig(), cargo_bin="cargo")

    assert str(exc.value.code).startswith("[build] Page file name collision")
