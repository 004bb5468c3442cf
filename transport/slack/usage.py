"""
Slack Usage Instructions

Help text shown when a command is empty, unknown or malformed.

The template catalog is built once at startup and never mutated, so it
is safe to share between concurrent requests. A template that does not
compile is a programming error and fails catalog construction.
"""

from types import MappingProxyType
from typing import Iterator, Mapping, Optional

from jinja2 import Environment, StrictUndefined, Template, TemplateError

from .schemas import VerifiedQuery

DEFAULT_BOT_COMMAND = "/argocd"

DEFAULT_USAGE_TEMPLATES: Mapping[str, str] = MappingProxyType({
    "list-subscriptions": (
        "*List your subscriptions*:\n"
        "```{{ cmd }} list-subscriptions```"
    ),
    "subscribe": (
        "*Subscribe current channel*:\n"
        "```{{ cmd }} subscribe <my-app> <optional-trigger>\n"
        "{{ cmd }} subscribe proj:<my-proj> <optional-trigger>```"
    ),
    "unsubscribe": (
        "*Unsubscribe current channel*:\n"
        "```{{ cmd }} unsubscribe <my-app> <optional-trigger>\n"
        "{{ cmd }} unsubscribe proj:<my-proj> <optional-trigger>```"
    ),
})


class UsageCatalog:
    """Immutable mapping of command name to compiled usage template."""

    def __init__(self, templates: Mapping[str, str] = DEFAULT_USAGE_TEMPLATES):
        env = Environment(undefined=StrictUndefined, autoescape=False)
        # from_string raises TemplateSyntaxError here, not at render time
        compiled = {name: env.from_string(source) for name, source in templates.items()}
        self._templates: Mapping[str, Template] = MappingProxyType(compiled)

    def __contains__(self, name: object) -> bool:
        return name in self._templates

    def __iter__(self) -> Iterator[str]:
        return iter(self._templates)

    def __len__(self) -> int:
        return len(self._templates)

    def render(self, name: str, bot_command: str) -> str:
        return self._templates[name].render(cmd=bot_command)


def usage_instructions(
    query: VerifiedQuery,
    command: str,
    error: Optional[Exception],
    catalog: UsageCatalog,
    default_bot_command: str = DEFAULT_BOT_COMMAND,
) -> str:
    """
    Render usage instructions for a Slack command.

    Args:
        query: Verified request parameters (reads `command`)
        command: Command name to document; unknown or "" lists everything
        error: Optional error to show above the instructions
        catalog: Usage template catalog
        default_bot_command: Slash command name when the request has none

    Returns:
        Rendered help text. Never raises: a rendering failure returns
        the error text instead.
    """
    bot_command = query.get("command") or default_bot_command

    parts = []
    if error is not None:
        parts.append(f"{error}\n")

    try:
        if command in catalog:
            parts.append(catalog.render(command, bot_command))
        else:
            parts.append(f":wave: Need some help with `{bot_command}`?\n")
            for name in catalog:
                parts.append(catalog.render(name, bot_command))
                parts.append("\n")
    except TemplateError as e:
        return str(e)

    return "".join(parts)
