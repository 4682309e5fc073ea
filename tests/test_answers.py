"""Tests for answers-file loading and schema validation."""

from __future__ import annotations

import json
import textwrap

import pytest

from metadata_wizard.answers import (
    AnswersValidationError,
    load_answers,
    validate_answers,
)

pytestmark = pytest.mark.unit


class TestLoadAnswers:
    def test_json(self, answers_file, sample_values):
        assert load_answers(answers_file, complete=True) == sample_values

    def test_yaml(self, tmp_path, sample_values):
        path = tmp_path / "answers.yaml"
        path.write_text(textwrap.dedent("""\
            MCP_NAME: weather_api
            MCP_SERVER_URL: https://mcp.example.com/api
            AUTH_PROVIDER_URL: https://auth.example.com/oauth/token
            NAMESPACE:
        """), encoding="utf-8")

        assert load_answers(path, complete=True) == sample_values

    def test_namespace_defaults_when_complete(self, tmp_path, sample_values):
        path = tmp_path / "answers.json"
        values = {k: v for k, v in sample_values.items() if k != "NAMESPACE"}
        path.write_text(json.dumps(values), encoding="utf-8")

        assert load_answers(path, complete=True)["NAMESPACE"] == ""

    def test_partial_allowed_when_not_complete(self, tmp_path):
        path = tmp_path / "answers.json"
        path.write_text(json.dumps({"MCP_NAME": "weather_api"}), encoding="utf-8")

        assert load_answers(path) == {"MCP_NAME": "weather_api"}

    def test_missing_required_when_complete(self, tmp_path):
        path = tmp_path / "answers.json"
        path.write_text(json.dumps({"MCP_NAME": "weather_api"}), encoding="utf-8")

        with pytest.raises(AnswersValidationError, match="MCP_SERVER_URL"):
            load_answers(path, complete=True)

    def test_file_not_found(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_answers(tmp_path / "nope.json")

    def test_unparseable_json(self, tmp_path):
        path = tmp_path / "answers.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(AnswersValidationError, match="Cannot parse"):
            load_answers(path)

    def test_unparseable_yaml(self, tmp_path):
        path = tmp_path / "answers.yml"
        path.write_text("MCP_NAME: [unterminated", encoding="utf-8")

        with pytest.raises(AnswersValidationError, match="Cannot parse"):
            load_answers(path)

    def test_directory_path(self, tmp_path):
        with pytest.raises(AnswersValidationError, match="Cannot read"):
            load_answers(tmp_path)

    @pytest.mark.parametrize("name", ["answers.json", "answers.yaml"])
    def test_non_utf8_bytes(self, tmp_path, name):
        path = tmp_path / name
        path.write_bytes(b'{"MCP_NAME": "\xff"}')

        with pytest.raises(AnswersValidationError):
            load_answers(path)


class TestValidateAnswers:
    @pytest.mark.parametrize(
        "key, value",
        [
            ("MCP_NAME", "3weather"),
            ("MCP_NAME", "weather\n"),
            ("MCP_NAME", "template"),
            ("MCP_SERVER_URL", "ftp://x"),
            ("AUTH_PROVIDER_URL", "https://"),
            ("NAMESPACE", "my-company"),
        ],
    )
    def test_invalid_values(self, sample_values, key, value):
        with pytest.raises(AnswersValidationError):
            validate_answers({**sample_values, key: value})

    def test_unknown_key_rejected(self, sample_values):
        with pytest.raises(AnswersValidationError, match="EXTRA"):
            validate_answers({**sample_values, "EXTRA": "x"})

    def test_non_mapping_rejected(self):
        with pytest.raises(AnswersValidationError):
            validate_answers(["MCP_NAME"])

    def test_non_string_rejected(self, sample_values):
        with pytest.raises(AnswersValidationError):
            validate_answers({**sample_values, "MCP_NAME": 42})

    def test_null_namespace_normalised(self, sample_values):
        assert validate_answers({**sample_values, "NAMESPACE": None})["NAMESPACE"] == ""
