"""
metadata_wizard.writer — Template rendering with dry-run support
================================================================
TemplateWriter copies a template to a new file while replacing literal
tokens.  The template itself is only ever read.  Every render is either
executed (normal mode) or reported only (dry_run=True).

Usage
-----
    from metadata_wizard.writer import TemplateWriter

    writer = TemplateWriter(dry_run=True)
    writer.render(template_path, destination_path, {"MCP_NAME": "weather_api"})
    writer.summary()
"""

import logging
from pathlib import Path

from metadata_wizard import console

logger = logging.getLogger(__name__)


def apply_replacements(content: str, replacements: dict[str, str]) -> str:
    """
    Replace every literal occurrence of each token in *content*.

    Tokens are applied in the map's iteration order; no attempt is made to
    detect a value that contains another token.
    """
    result = content
    for token, value in replacements.items():
        result = result.replace(token, value)
    return result


class TemplateWriter:
    """
    Produces instance files from token-bearing metadata templates.

    One writer is used per wizard run.  It remembers which destinations
    were rendered and which templates could not be found, for the closing
    report.  With ``dry_run`` set, renders are announced but the
    destination is left alone.

    Parameters
    ----------
    dry_run : bool
        Announce each destination instead of creating it.
    """

    def __init__(self, dry_run: bool = False) -> None:
        self.dry_run = dry_run
        self._written: list[str] = []
        self._skipped: list[str] = []

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(
        self,
        template_path: Path,
        destination_path: Path,
        replacements: dict[str, str],
    ) -> bool:
        """
        Write *template_path* with *replacements* applied to *destination_path*.

        An existing destination is overwritten.  A missing template, or a
        destination that resolves to the template itself, is reported and
        skipped; any other I/O failure propagates.

        Returns
        -------
        bool
            True if the file was written (or would be in dry-run mode).
        """
        template_path = Path(template_path)
        destination_path = Path(destination_path)

        if not template_path.is_file():
            self._skipped.append(str(template_path))
            console.error(f"Template not found: {template_path.name}")
            logger.warning("Template missing: %s", template_path)
            return False

        if destination_path.resolve() == template_path.resolve():
            self._skipped.append(str(template_path))
            console.error(f"Refusing to overwrite template: {template_path.name}")
            logger.warning("Destination is the template itself: %s", template_path)
            return False

        # newline="" keeps the template's line endings byte-for-byte
        with template_path.open("r", encoding="utf-8", newline="") as f:
            content = f.read()
        rendered = apply_replacements(content, replacements)

        if self.dry_run:
            console.info(f"Would create: {destination_path.name}")
            self._written.append(str(destination_path))
            return True

        with destination_path.open("w", encoding="utf-8", newline="") as f:
            f.write(rendered)
        logger.debug("Rendered %s -> %s", template_path, destination_path)
        console.success(f"Created: {destination_path.name}")
        self._written.append(str(destination_path))
        return True

    # ------------------------------------------------------------------
    # Reporting
    # ------------------------------------------------------------------

    def summary(self) -> None:
        """Report how many instance files were produced and how many templates were passed over."""
        verb = "Planned" if self.dry_run else "Created"
        console.line()
        console.line(f"  {verb}: {len(self._written)} metadata file(s)")
        if self._skipped:
            console.line(f"  Not rendered: {len(self._skipped)} template(s)")
        if self.dry_run:
            console.line()
            console.warning("Dry run: the metadata directory was left untouched.")
            console.line("  Run again without --dry-run to create the files.")

    @property
    def written_files(self) -> list[str]:
        """Destination paths, in render order."""
        return list(self._written)

    @property
    def skipped_files(self) -> list[str]:
        """Template paths that produced no output."""
        return list(self._skipped)
