"""
metadata_wizard.answers — Answers-file loading & validation
===========================================================
Loads pre-filled wizard answers from a JSON or YAML file and validates them
against ``schemas/answers-schema.json``, which encodes the same rules as the
catalog validators.

An answers file may be partial (its values then act as prompt defaults) or
complete (required for --non-interactive runs).
"""

import json
import logging
from pathlib import Path

import jsonschema
import yaml
from jsonschema import ValidationError

from metadata_wizard.catalog import VARIABLES

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).parent / "schemas" / "answers-schema.json"

REQUIRED_KEYS: tuple[str, ...] = tuple(v.key for v in VARIABLES if not v.optional)


class AnswersValidationError(Exception):
    """Raised when an answers file cannot be parsed or fails validation."""


def _load_file(path: Path) -> object:
    with open(path, "r", encoding="utf-8") as f:
        if path.suffix.lower() in (".yaml", ".yml"):
            return yaml.safe_load(f)
        return json.load(f)


def validate_answers(data: object) -> dict[str, str]:
    """
    Validate a parsed answers mapping and return it with ``NAMESPACE``
    normalised (``null`` becomes ``""``).

    Raises
    ------
    AnswersValidationError
        If *data* does not match the answers schema.
    """
    with open(SCHEMA_PATH, "r", encoding="utf-8") as f:
        schema = json.load(f)
    try:
        jsonschema.validate(instance=data, schema=schema)
    except ValidationError as exc:
        raise AnswersValidationError(
            f"Answers validation failed at '{exc.json_path}': {exc.message}"
        ) from exc

    answers = dict(data)
    if "NAMESPACE" in answers and answers["NAMESPACE"] is None:
        answers["NAMESPACE"] = ""

    # Schema patterns use search semantics; the catalog validators are exact.
    for variable in VARIABLES:
        if variable.key in answers and not variable.validate(answers[variable.key]):
            raise AnswersValidationError(
                f"Answers validation failed at '$.{variable.key}': {variable.error}"
            )
    return answers


def load_answers(path: "str | Path", complete: bool = False) -> dict[str, str]:
    """
    Load and validate the answers file at *path*.

    Parameters
    ----------
    path : str | Path
        ``.json``, ``.yaml`` or ``.yml`` file.
    complete : bool
        When True every required variable must be present; ``NAMESPACE``
        defaults to ``""``.

    Raises
    ------
    FileNotFoundError
        If *path* does not exist.
    AnswersValidationError
        If the file cannot be read or parsed, fails the schema, or (with
        *complete*) lacks a required key.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Answers file not found: {path}")

    logger.info("Loading wizard answers from: %s", path)
    try:
        data = _load_file(path)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise AnswersValidationError(f"Cannot parse answers file {path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise AnswersValidationError(f"Answers file {path} is not valid UTF-8: {exc}") from exc
    except OSError as exc:
        raise AnswersValidationError(f"Cannot read answers file {path}: {exc}") from exc

    answers = validate_answers(data)

    if complete:
        missing = [k for k in REQUIRED_KEYS if k not in answers]
        if missing:
            raise AnswersValidationError(
                f"Answers file is missing required keys: {missing}"
            )
        answers.setdefault("NAMESPACE", "")

    return answers
