"""Shared pytest fixtures for the metadata wizard test suite.

Provides reusable fixtures for:
- A temporary metadata root holding the four templates
- Scripted answers for ``input()``
- Sample answer sets and answers files
"""

from __future__ import annotations

import builtins
import json
import textwrap
from pathlib import Path

import pytest

from metadata_wizard.catalog import FILE_RULES


# ---------------------------------------------------------------------------
# Template content
# ---------------------------------------------------------------------------

TEMPLATE_BODY = textwrap.dedent("""\
    <?xml version="1.0" encoding="UTF-8"?>
    <Metadata xmlns="http://soap.sforce.com/2006/04/metadata">
        <label>MCP_NAME</label>
        <reference>NAMESPACE__MCP_NAME</reference>
        <url>MCP_SERVER_URL</url>
        <tokenUrl>AUTH_PROVIDER_URL</tokenUrl>
    </Metadata>
""")


@pytest.fixture
def metadata_root(tmp_path: Path) -> Path:
    """A force-app/main/default style directory with all four templates."""
    root = tmp_path / "force-app" / "main" / "default"
    for rule in FILE_RULES:
        directory = root / rule.directory
        directory.mkdir(parents=True)
        (directory / rule.template_name).write_text(TEMPLATE_BODY, encoding="utf-8")
    return root


@pytest.fixture
def template_snapshot(metadata_root: Path) -> dict[str, bytes]:
    """Raw bytes of every template, taken before the test body runs."""
    return {
        rule.template_name: (metadata_root / rule.directory / rule.template_name).read_bytes()
        for rule in FILE_RULES
    }


# ---------------------------------------------------------------------------
# Answers
# ---------------------------------------------------------------------------

@pytest.fixture
def sample_values() -> dict[str, str]:
    return {
        "MCP_NAME": "weather_api",
        "MCP_SERVER_URL": "https://mcp.example.com/api",
        "AUTH_PROVIDER_URL": "https://auth.example.com/oauth/token",
        "NAMESPACE": "",
    }


@pytest.fixture
def answers_file(tmp_path: Path, sample_values: dict[str, str]) -> Path:
    path = tmp_path / "answers.json"
    path.write_text(json.dumps(sample_values), encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Scripted console input
# ---------------------------------------------------------------------------

@pytest.fixture
def scripted_input(monkeypatch: pytest.MonkeyPatch):
    """Feed ``input()`` from a list of lines; EOF once the list is exhausted.

    Usage::

        prompts = scripted_input(["", "weather_api", ...])
        ...
        assert prompts.remaining == []
    """

    class _Script:
        def __init__(self, lines: list[str]) -> None:
            self.remaining = list(lines)

        def __call__(self, prompt: str = "") -> str:
            if not self.remaining:
                raise EOFError
            return self.remaining.pop(0)

    def _install(lines: list[str]) -> _Script:
        script = _Script(lines)
        monkeypatch.setattr(builtins, "input", script)
        return script

    return _install
