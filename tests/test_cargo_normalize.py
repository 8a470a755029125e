from __future__ import annotations

from typing import Any, Dict, Optional

import pytest

from errorbook.domain import DiagnosticCode, component_key
from errorbook.errors import DiagnosticExtractionError
from tools.cargo.normalize import extract_diagnostic, extract_diagnostics


def _payload(
    rendered: Optional[str],
    *,
    package_id: str = "demo 0.1.0 (path+file:///work/demo)",
    code: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    message: Dict[str, Any] = {"message": "m", "level": "error", "spans": [], "children": [], "code": code}
    if rendered is not None:
        message["rendered"] = rendered
    return {"reason": "compiler-message", "package_id": package_id, "message": message}


def test_identity_is_first_rendered_line_verbatim() -> None:
    rendered = "error[E0308]: mismatched types\n --> src/main.rs:2:18\n  |\n"
    diag = extract_diagnostic(_payload(rendered, code={"code": "E0308", "explanation": "Expected..."}))

    assert diag.identity == "error[E0308]: mismatched types"
    assert diag.rendered == rendered
    assert diag.component == "demo 0.1.0"
    assert diag.code == DiagnosticCode(code="E0308", explanation="Expected...")


def test_crlf_first_line_loses_only_the_carriage_return() -> None:
    diag = extract_diagnostic(_payload("warning: unused import  \r\nmore"))
    assert diag.identity == "warning: unused import  "


def test_absent_code_stays_none() -> None:
    assert extract_diagnostic(_payload("warning: x")).code is None


@pytest.mark.parametrize(
    "code",
    [
        {"code": 308, "explanation": None},
        {"explanation": "no code field"},
        {"code": "E0308", "explanation": ["not", "text"]},
    ],
)
def test_malformed_code_object_is_fatal(code: Dict[str, Any]) -> None:
    with pytest.raises(DiagnosticExtractionError, match="mismatched types"):
        extract_diagnostic(_payload("error[E0308]: mismatched types", code=code))


def test_null_explanation_is_kept_as_none() -> None:
    diag = extract_diagnostic(_payload("warning: x", code={"code": "unused_variables", "explanation": None}))
    assert diag.code == DiagnosticCode(code="unused_variables", explanation=None)


@pytest.mark.parametrize(
    "payload",
    [
        _payload(None),
        _payload(""),
        _payload("\nsecond line only"),
        {"reason": "compiler-message", "package_id": "demo 0.1.0 (x)"},
        {"reason": "compiler-message", "message": {"rendered": "warning: x"}},
    ],
)
def test_malformed_message_is_fatal(payload: Dict[str, Any]) -> None:
    with pytest.raises(DiagnosticExtractionError):
        extract_diagnostic(payload)


def test_unrecognised_package_id_is_fatal() -> None:
    with pytest.raises(DiagnosticExtractionError):
        extract_diagnostic(_payload("warning: x", package_id="justaname"))


@pytest.mark.parametrize(
    "package_id, expected",
    [
        ("demo 0.1.0 (path+file:///work/demo)", "demo 0.1.0"),
        ("serde 1.0.197 (registry+https://github.com/rust-lang/crates.io-index)", "serde 1.0.197"),
        ("registry+https://github.com/rust-lang/crates.io-index#serde@1.0.197", "serde 1.0.197"),
        ("path+file:///work/ws/crates/core#ws-core@0.2.0", "ws-core 0.2.0"),
        ("path+file:///work/demo#0.1.0", "demo 0.1.0"),
    ],
)
def test_component_key_forms(package_id: str, expected: str) -> None:
    assert component_key(package_id) == expected


def test_warnings_emitted_trailer_is_filtered_but_warnings_are_kept() -> None:
    diags = extract_diagnostics(
        [
            _payload("warning: unused variable: `x`\n --> src/lib.rs:1:5"),
            _payload("warning: 2 warnings emitted\n"),
            _payload("error: aborting due to previous error; 2 warnings emitted"),
            _payload("warning: unused import: `std::io`"),
        ]
    )

    assert [d.identity for d in diags] == [
        "warning: unused variable: `x`",
        "warning: unused import: `std::io`",
    ]
