"""
metadata_wizard — MCP Metadata Setup Wizard for Salesforce
==========================================================
Prompts for an MCP server's name, URLs and optional namespace, then copies
the four Salesforce metadata templates (external credential, external
service registration, named credential, permission set) to instance files
with the placeholder tokens substituted.

Sub-modules
-----------
  metadata_wizard.catalog     Variables, file rules, token set
  metadata_wizard.collector   Interactive Q&A helpers (collect_answers, confirm)
  metadata_wizard.scanner     Existing-instance detection
  metadata_wizard.writer      TemplateWriter — rendering with dry-run support
  metadata_wizard.answers     JSON / YAML answers files + schema validation
  metadata_wizard.console     Coloured status output
  metadata_wizard.runner      run_wizard() + list_instances() orchestration

Public API (re-exported here for convenience)
---------------------------------------------
  from metadata_wizard import run_wizard, list_instances, SetupCancelledError
"""

from metadata_wizard.collector import SetupCancelledError
from metadata_wizard.runner import list_instances, run_wizard

__all__ = [
    "run_wizard",
    "list_instances",
    "SetupCancelledError",
]
