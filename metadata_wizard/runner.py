"""
metadata_wizard.runner — Main Wizard Orchestration Logic
========================================================
Coordinates the full wizard flow:
  1. Welcome banner and list of requested values
  2. Existing instances, then the Q&A (or a pre-validated answers dict)
  3. Review of values and planned file copies, with a yes/no gate
  4. Overwrite gate when the instance already exists
  5. Rendering of the four templates via TemplateWriter
  6. Next-steps instructions

Public functions
----------------
  run_wizard(metadata_root, ...)   — collect, confirm and write all artefacts
  list_instances(metadata_root)    — print previously generated instances
"""

import logging
from pathlib import Path

from metadata_wizard import console
from metadata_wizard.catalog import FILE_RULES, VARIABLE_KEYS, VARIABLES, build_replacements
from metadata_wizard.collector import (
    SetupCancelledError,
    collect_answers,
    confirm,
    wait_for_enter,
)
from metadata_wizard.scanner import instance_exists, list_existing_instances
from metadata_wizard.writer import TemplateWriter

logger = logging.getLogger(__name__)

DEFAULT_METADATA_ROOT = Path("force-app") / "main" / "default"

_LABEL_WIDTH = max(len(key) for key in VARIABLE_KEYS) + 1


# ---------------------------------------------------------------------------
# Screens
# ---------------------------------------------------------------------------

def _print_welcome() -> None:
    console.clear()
    console.header("MCP Metadata Setup Wizard")

    console.line("This wizard will configure the Salesforce metadata files for your")
    console.line("Model Context Protocol (MCP) server integration.")
    console.line()
    console.line("You'll be prompted for the following values:")
    for i, variable in enumerate(VARIABLES, start=1):
        opt = " (optional)" if variable.optional else ""
        console.line(f"  {i}. {variable.key}{opt}")


def _print_review(metadata_root: Path, values: dict[str, str]) -> None:
    console.header("Step 2: Review Configuration")
    console.line(f"Metadata directory: {metadata_root}")
    console.line()
    console.line("Please review your configuration:")
    console.line()
    for variable in VARIABLES:
        value = values.get(variable.key, "")
        if variable.optional and not value:
            value = "(none)"
        console.label(variable.key, value, width=_LABEL_WIDTH)

    console.line()
    console.line("Files to be created:", style="bold")
    instance_name = values["MCP_NAME"]
    for rule in FILE_RULES:
        console.line(f"  • {rule.directory}/{rule.template_name}")
        console.line(f"    → {rule.directory}/{rule.destination_name(instance_name)}")
        console.line()


def _print_next_steps(metadata_root: Path, instance_name: str) -> None:
    console.header("Setup Complete!")

    console.line("Your MCP metadata files have been configured successfully.")
    console.line()
    console.line("Next Steps:", style="bold")
    console.line(f"  1. Review the generated files in {metadata_root}/")
    console.line("  2. Deploy to your Salesforce org:")
    console.line("     sf project deploy start --source-dir force-app", style="cyan")
    console.line("  3. Configure the Client ID and Client Secret in Salesforce Setup:")
    console.line(
        f"     Setup → Named Credentials → External Credentials → {instance_name}",
        style="cyan",
    )
    console.line("  4. Assign the permission set to users who need access:")
    console.line(f"     {instance_name}_Perm_Set", style="cyan")
    console.line()
    console.success("Happy coding!")
    console.line()


# ---------------------------------------------------------------------------
# Core orchestration
# ---------------------------------------------------------------------------

def run_wizard(
    metadata_root: "str | Path" = DEFAULT_METADATA_ROOT,
    prefill: dict | None = None,
    non_interactive: bool = False,
    dry_run: bool = False,
    overwrite: bool = False,
) -> list[str]:
    """
    Collect the wizard values and render the four metadata templates.

    Parameters
    ----------
    metadata_root : str | Path
        Directory holding the four artefact sub-directories
        (``force-app/main/default`` in a Salesforce DX project).
    prefill : dict | None
        Validated answers.  Used as prompt defaults interactively, or as the
        complete answer set when *non_interactive* is True.
    non_interactive : bool
        Skip every prompt; the review gate counts as confirmed.
    dry_run : bool
        Report intended writes without touching disk.
    overwrite : bool
        Replace an existing instance without asking.

    Returns
    -------
    list[str]
        Destination paths written (or that would be, in dry-run mode).

    Raises
    ------
    SetupCancelledError
        If the user declines a confirmation, interrupts input, or a
        non-interactive run would overwrite without *overwrite*.
    """
    root = Path(metadata_root)

    if not non_interactive:
        _print_welcome()
        wait_for_enter()

    # ---- Step 1: values ----
    console.header("Step 1: Configuration Values")

    existing = list_existing_instances(root)
    if existing:
        console.info(f"Existing MCP instances: {', '.join(existing)}")

    if non_interactive:
        values = dict(prefill or {})
        for key in VARIABLE_KEYS:
            console.line(f"  {key}: {values.get(key, '')}")
    else:
        values = collect_answers(prefill)

    replacements = build_replacements(values)
    instance_name = values["MCP_NAME"]
    logger.debug("Replacement map: %s", replacements)

    # ---- Step 2: review ----
    _print_review(root, values)

    if not non_interactive and not confirm("Apply these changes?"):
        raise SetupCancelledError("Changes not confirmed.")

    if instance_exists(root, instance_name) and not overwrite:
        logger.info("Instance '%s' already exists under %s", instance_name, root)
        if non_interactive:
            console.warning(
                f"Metadata for '{instance_name}' already exists. Use --overwrite to replace it."
            )
            raise SetupCancelledError("Instance already exists.")
        if not confirm(f"Metadata for '{instance_name}' already exists. Overwrite?"):
            raise SetupCancelledError("Overwrite not confirmed.")

    # ---- Step 3: apply ----
    console.header("Step 3: Applying Changes")

    writer = TemplateWriter(dry_run=dry_run)
    for rule in FILE_RULES:
        directory = root / rule.directory
        writer.render(
            directory / rule.template_name,
            directory / rule.destination_name(instance_name),
            replacements,
        )

    writer.summary()
    _print_next_steps(root, instance_name)
    return writer.written_files


# ---------------------------------------------------------------------------
# list_instances
# ---------------------------------------------------------------------------

def list_instances(metadata_root: "str | Path" = DEFAULT_METADATA_ROOT) -> list[str]:
    """Print the instances found under *metadata_root* and return them."""
    root = Path(metadata_root)
    instances = list_existing_instances(root)
    if not instances:
        console.info(f"No MCP instances configured yet under {root}.")
        console.line("  Run:  python setup_wizard.py  to configure your first instance.")
        return instances

    console.header(f"Configured MCP Instances  ({root})")
    for name in instances:
        console.line(f"  • {name}")
    console.line()
    return instances
