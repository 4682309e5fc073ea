"""
metadata_wizard.catalog — Prompt Catalog, File Rules & Token Set
================================================================
Static definitions that drive the wizard:

  VARIABLES      ordered prompts collected from the user
  FILE_RULES     the four metadata artefacts copied from their templates
  TOKENS         literal placeholders substituted inside template bodies

Tokens are replaced verbatim wherever they occur in a template (no scoping,
no escaping).  Token values must therefore never contain another token.
"""

import re
from dataclasses import dataclass
from typing import Callable

# Base name shared by every template file (e.g. template.namedCredential-meta.xml)
TEMPLATE_NAME = "template"

_IDENTIFIER_RE = re.compile(r"[a-zA-Z][a-zA-Z0-9_]*")
_HTTP_URL_RE   = re.compile(r"^https?://.+")


# ---------------------------------------------------------------------------
# Validators
# ---------------------------------------------------------------------------

def is_identifier(value: str) -> bool:
    """A letter followed by letters, digits or underscores."""
    return bool(_IDENTIFIER_RE.fullmatch(value))


def is_http_url(value: str) -> bool:
    return bool(_HTTP_URL_RE.match(value))


def is_optional_identifier(value: str) -> bool:
    return value == "" or is_identifier(value)


def is_instance_name(value: str) -> bool:
    """An identifier that does not collide with the template base name."""
    return is_identifier(value) and value != TEMPLATE_NAME


# ---------------------------------------------------------------------------
# Variables
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Variable:
    """A single value the wizard asks for."""
    key: str
    prompt: str
    description: str
    validate: Callable[[str], bool]
    error: str
    optional: bool = False


_IDENTIFIER_ERROR = "Must start with a letter and contain only letters, numbers, and underscores."
_URL_ERROR        = "Must be a valid URL starting with http:// or https://"
_NAME_ERROR       = _IDENTIFIER_ERROR + f" '{TEMPLATE_NAME}' is reserved for the template files."

VARIABLES: tuple[Variable, ...] = (
    Variable(
        key="MCP_NAME",
        prompt="MCP server name",
        description=(
            "A unique identifier for your MCP server (e.g., weather_api, slack_mcp).\n"
            "This will be used for file names and labels in Salesforce."
        ),
        validate=is_instance_name,
        error=_NAME_ERROR,
    ),
    Variable(
        key="MCP_SERVER_URL",
        prompt="MCP server URL",
        description=(
            "The full URL of your MCP server endpoint.\n"
            "Example: https://mcp.example.com/api"
        ),
        validate=is_http_url,
        error=_URL_ERROR,
    ),
    Variable(
        key="AUTH_PROVIDER_URL",
        prompt="OAuth token endpoint URL",
        description=(
            "The OAuth 2.0 token endpoint for authentication.\n"
            "Example: https://auth.example.com/oauth/token"
        ),
        validate=is_http_url,
        error=_URL_ERROR,
    ),
    Variable(
        key="NAMESPACE",
        prompt="Salesforce namespace (optional)",
        description=(
            "Your Salesforce namespace prefix, if applicable.\n"
            "Leave empty if you don't have a namespace."
        ),
        validate=is_optional_identifier,
        error=_IDENTIFIER_ERROR,
        optional=True,
    ),
)

VARIABLE_KEYS: tuple[str, ...] = tuple(v.key for v in VARIABLES)


# ---------------------------------------------------------------------------
# File rules
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class FileRule:
    """
    One metadata artefact type.

    ``destination_name("weather_api")`` for the permission-set rule gives
    ``weather_api_Perm_Set.permissionset-meta.xml``.
    """
    directory: str
    metadata_suffix: str
    name_suffix: str = ""

    def destination_name(self, instance_name: str) -> str:
        return f"{instance_name}{self.name_suffix}.{self.metadata_suffix}-meta.xml"

    @property
    def template_name(self) -> str:
        return self.destination_name(TEMPLATE_NAME)


FILE_RULES: tuple[FileRule, ...] = (
    FileRule("externalCredentials",          "externalCredential"),
    FileRule("externalServiceRegistrations", "externalServiceRegistration"),
    FileRule("namedCredentials",             "namedCredential"),
    FileRule("permissionsets",               "permissionset", name_suffix="_Perm_Set"),
)

# The external-credential directory is the canonical record of which
# instances exist.
CANONICAL_RULE = FILE_RULES[0]


# ---------------------------------------------------------------------------
# Tokens & replacement map
# ---------------------------------------------------------------------------

# Order matters: NAMESPACE__ must be consumed before the bare NAMESPACE token.
TOKENS: tuple[str, ...] = (
    "MCP_NAME",
    "MCP_SERVER_URL",
    "AUTH_PROVIDER_URL",
    "NAMESPACE__",
    "NAMESPACE",
)


def namespace_prefix(namespace: str) -> str:
    """Return ``""`` for no namespace, otherwise ``"<namespace>__"``."""
    return f"{namespace}__" if namespace else ""


def build_replacements(values: dict[str, str]) -> dict[str, str]:
    """
    Derive the token → value map from the collected *values*.

    Iteration order of the returned dict is the order replacements are
    applied in (see TOKENS).
    """
    namespace = values.get("NAMESPACE", "")
    resolved = dict(values, NAMESPACE=namespace, NAMESPACE__=namespace_prefix(namespace))
    return {token: resolved[token] for token in TOKENS}
