"""
Slack Usage Instructions Tests

Catalog construction and help text rendering.
"""

import pytest
from jinja2 import TemplateSyntaxError

from transport.slack.schemas import VerifiedQuery
from transport.slack.usage import (
    DEFAULT_USAGE_TEMPLATES,
    UsageCatalog,
    usage_instructions,
)

HEADINGS = [
    "*List your subscriptions*",
    "*Subscribe current channel*",
    "*Unsubscribe current channel*",
]


@pytest.fixture
def query():
    return VerifiedQuery(service="slack", values={"channel_name": ["general"]})


class TestUsageCatalog:
    """Build-once template catalog."""

    def test_default_catalog_commands(self, catalog):
        assert list(catalog) == ["list-subscriptions", "subscribe", "unsubscribe"]
        assert len(catalog) == 3
        assert "subscribe" in catalog
        assert "help" not in catalog

    def test_render_substitutes_bot_command(self, catalog):
        assert catalog.render("list-subscriptions", "/argocd") == (
            "*List your subscriptions*:\n```/argocd list-subscriptions```"
        )

    def test_malformed_template_fails_at_construction(self):
        """A broken template is rejected before any request is served."""
        with pytest.raises(TemplateSyntaxError):
            UsageCatalog({"broken": "{{ cmd "})

    def test_default_templates_are_read_only(self):
        with pytest.raises(TypeError):
            DEFAULT_USAGE_TEMPLATES["help"] = "{{ cmd }} help"


class TestUsageInstructions:
    """usage_instructions rendering."""

    def test_unknown_command_renders_every_entry(self, catalog, query):
        usage = usage_instructions(query, "no-such-command", None, catalog)

        assert usage.startswith(":wave: Need some help with `/argocd`?\n")
        for heading in HEADINGS:
            assert usage.count(heading) == 1

    def test_empty_command_renders_full_listing(self, catalog, query):
        usage = usage_instructions(query, "", None, catalog)

        expected = ":wave: Need some help with `/argocd`?\n" + "".join(
            catalog.render(name, "/argocd") + "\n" for name in catalog
        )
        assert usage == expected

    @pytest.mark.parametrize("command", ["list-subscriptions", "subscribe", "unsubscribe"])
    def test_known_command_renders_one_entry(self, catalog, query, command):
        usage = usage_instructions(query, command, None, catalog)

        assert usage == catalog.render(command, "/argocd")
        assert ":wave:" not in usage
        assert sum(usage.count(heading) for heading in HEADINGS) == 1

    def test_prior_error_is_prepended(self, catalog, query):
        usage = usage_instructions(
            query, "subscribe", ValueError("at least one argument expected"), catalog
        )

        assert usage == (
            "at least one argument expected\n"
            "*Subscribe current channel*:\n"
            "```/argocd subscribe <my-app> <optional-trigger>\n"
            "/argocd subscribe proj:<my-proj> <optional-trigger>```"
        )

    def test_command_parameter_overrides_default(self, catalog):
        query = VerifiedQuery(service="slack", values={"command": ["/notify"]})

        usage = usage_instructions(query, "unsubscribe", None, catalog)

        assert "/notify unsubscribe <my-app>" in usage
        assert "/argocd" not in usage

    def test_empty_command_parameter_falls_back(self, catalog):
        query = VerifiedQuery(service="slack", values={"command": [""]})

        usage = usage_instructions(query, "", None, catalog, default_bot_command="/bot")

        assert "Need some help with `/bot`?" in usage

    def test_render_failure_returns_error_text(self, query):
        """Rendering problems degrade to the error text instead of raising."""
        catalog = UsageCatalog({"broken": "{{ missing }}"})

        usage = usage_instructions(query, "broken", None, catalog)

        assert usage == "'missing' is undefined"
