"""Assertions for comparing generated output with expected (golden) text."""

import difflib
import logging
import os
from pathlib import Path

from good_codegen.core.text import normalize_text
from good_codegen.errors import GoldenMismatch
from good_codegen.output import OutputBuffer

logger = logging.getLogger(__name__)

UPDATE_GOLDEN_ENV = "GOOD_CODEGEN_UPDATE_GOLDEN"


def _text_of(actual: OutputBuffer | str) -> str:
    return actual.contents if isinstance(actual, OutputBuffer) else actual


def diff_text(expected: str, actual: str, label: str = "output") -> str:
    return "\n".join(
        difflib.unified_diff(
            expected.splitlines(),
            actual.splitlines(),
            fromfile=f"expected/{label}",
            tofile=f"actual/{label}",
            lineterm="",
        )
    )


def assert_content_equals(
    actual: OutputBuffer | str, expected: str, strip_whitespace: bool = True
) -> None:
    """Raise :class:`GoldenMismatch` unless both texts are equal once normalized."""
    label = actual.name if isinstance(actual, OutputBuffer) else "output"
    actual_text = normalize_text(_text_of(actual), strip_whitespace)
    expected_text = normalize_text(expected, strip_whitespace)
    if actual_text != expected_text:
        raise GoldenMismatch(
            f"{label} does not match the expected content",
            diff_text(expected_text, actual_text, label),
        )


def assert_matches_golden(
    actual: OutputBuffer | str,
    golden_path: str | Path,
    strip_whitespace: bool = True,
    update: bool | None = None,
) -> None:
    """Compare ``actual`` with the contents of ``golden_path``.

    With ``update`` (or ``GOOD_CODEGEN_UPDATE_GOLDEN=1`` in the environment)
    the golden file is rewritten from ``actual`` instead.
    """
    golden_path = Path(golden_path)
    if update is None:
        update = os.environ.get(UPDATE_GOLDEN_ENV) == "1"
    if update:
        golden_path.parent.mkdir(parents=True, exist_ok=True)
        golden_path.write_text(_text_of(actual), encoding="utf-8")
        logger.info("Updated golden file %s", golden_path)
        return
    expected = golden_path.read_text(encoding="utf-8")
    assert_content_equals(actual, expected, strip_whitespace=strip_whitespace)
