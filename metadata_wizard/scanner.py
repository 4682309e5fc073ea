"""
metadata_wizard.scanner — Existing-instance detection
=====================================================
The external-credential directory is treated as the canonical list of
instances that have already been generated.  The overwrite check, on the
other hand, looks at all four artefact directories.
"""

import logging
import re
from pathlib import Path

from metadata_wizard.catalog import CANONICAL_RULE, FILE_RULES, TEMPLATE_NAME

logger = logging.getLogger(__name__)

_INSTANCE_FILE_RE = re.compile(
    rf"^(.+)\.{re.escape(CANONICAL_RULE.metadata_suffix)}-meta\.xml$"
)


def list_existing_instances(metadata_root: "str | Path") -> list[str]:
    """
    Return the names of previously generated instances, sorted ascending.

    A missing directory simply means no instances exist yet.
    """
    directory = Path(metadata_root) / CANONICAL_RULE.directory
    if not directory.is_dir():
        logger.debug("No instance directory at %s", directory)
        return []

    names: set[str] = set()
    for entry in directory.iterdir():
        if not entry.is_file():
            continue
        match = _INSTANCE_FILE_RE.match(entry.name)
        if match and match.group(1) != TEMPLATE_NAME:
            names.add(match.group(1))
    return sorted(names)


def find_existing_files(metadata_root: "str | Path", instance_name: str) -> list[Path]:
    """Return the destination files for *instance_name* that are already on disk."""
    root = Path(metadata_root)
    return [
        path
        for path in (root / rule.directory / rule.destination_name(instance_name)
                     for rule in FILE_RULES)
        if path.exists()
    ]


def instance_exists(metadata_root: "str | Path", instance_name: str) -> bool:
    """True if any of the four metadata files for *instance_name* exist."""
    return bool(find_existing_files(metadata_root, instance_name))
