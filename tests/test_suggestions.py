"""Tests for suggestion providers, the registry and the registrar."""

from __future__ import annotations

from typing import Any

import pytest

from flowtree import FlowResource, SourceSchemaType
from flowtree.suggestions import (
    StaticSuggestionProvider,
    Suggestion,
    SuggestionProvider,
    SuggestionRegistrar,
    SuggestionRegistry,
    VariableSuggestionProvider,
    flow_suggestion_factories,
)

FUNCTIONS = (
    Suggestion("citrus:randomNumber()", "Random number", "Functions"),
    Suggestion("citrus:concat()", "Concatenate strings", "Functions"),
)

MATCHERS = (Suggestion("@contains()@", "Contains", "Validation matchers"),)


@pytest.fixture
def resource() -> FlowResource:
    return FlowResource(
        {
            "name": "vars",
            "variables": [
                {"name": "userName", "value": "christoph"},
                {"name": "counter", "value": "1"},
                {"value": "nameless"},
            ],
            "actions": [],
        }
    )


# ---------------------------------------------------------------------------
# Providers
# ---------------------------------------------------------------------------


class TestStaticSuggestionProvider:
    def test_prefix_filter_is_case_insensitive(self) -> None:
        provider = StaticSuggestionProvider("fn", FUNCTIONS)
        assert provider.get_suggestions("CITRUS:R", {}) == [FUNCTIONS[0]]

    def test_empty_word_returns_all(self) -> None:
        provider = StaticSuggestionProvider("fn", FUNCTIONS)
        assert provider.get_suggestions("", {}) == list(FUNCTIONS)

    @pytest.mark.parametrize(
        ("schema", "expected"),
        [(None, True), ({"type": "string"}, True), ({}, True), ({"type": "integer"}, False)],
    )
    def test_applies_to_string_properties(self, schema: Any, expected: bool) -> None:
        provider = StaticSuggestionProvider("fn", FUNCTIONS)
        assert provider.applies_to("message", schema) is expected

    def test_satisfies_protocol(self) -> None:
        assert isinstance(StaticSuggestionProvider("fn", ()), SuggestionProvider)


class TestVariableSuggestionProvider:
    def test_substring_match(self, resource: FlowResource) -> None:
        provider = VariableSuggestionProvider(resource)
        assert provider.get_suggestions("NAME", {}) == [
            Suggestion("${userName}", "christoph", "Variables")
        ]

    def test_reads_variables_live(self, resource: FlowResource) -> None:
        provider = VariableSuggestionProvider(resource)
        document = resource.to_json()
        assert document is not None
        document["variables"].append({"name": "nameTwo", "value": "x"})
        assert [s.value for s in provider.get_suggestions("name", {})] == [
            "${userName}",
            "${nameTwo}",
        ]

    def test_no_variables(self) -> None:
        provider = VariableSuggestionProvider(FlowResource({"name": "x", "actions": []}))
        assert provider.get_suggestions("", {}) == []

    def test_empty_resource(self) -> None:
        assert VariableSuggestionProvider(FlowResource()).get_suggestions("", {}) == []


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


class TestSuggestionRegistry:
    def test_registration_order(self) -> None:
        registry = SuggestionRegistry()
        registry.register_provider(StaticSuggestionProvider("fn", FUNCTIONS))
        registry.register_provider(StaticSuggestionProvider("vm", MATCHERS))
        assert [p.id for p in registry.providers] == ["fn", "vm"]
        assert registry.get_suggestions("") == [*FUNCTIONS, *MATCHERS]

    def test_same_id_replaces(self) -> None:
        registry = SuggestionRegistry()
        registry.register_provider(StaticSuggestionProvider("fn", FUNCTIONS))
        registry.register_provider(StaticSuggestionProvider("fn", MATCHERS))
        assert len(registry.providers) == 1
        assert registry.get_suggestions("") == list(MATCHERS)

    def test_unregister(self) -> None:
        registry = SuggestionRegistry()
        registry.register_provider(StaticSuggestionProvider("fn", FUNCTIONS))
        assert registry.unregister_provider("fn") is True
        assert registry.unregister_provider("fn") is False
        assert registry.providers == ()

    def test_non_string_property_skipped(self) -> None:
        registry = SuggestionRegistry()
        registry.register_provider(StaticSuggestionProvider("fn", FUNCTIONS))
        assert registry.get_suggestions("", "milliseconds", {"type": "integer"}) == []


# ---------------------------------------------------------------------------
# Registrar
# ---------------------------------------------------------------------------


class TestSuggestionRegistrar:
    def test_registers_flow_providers(self, resource: FlowResource) -> None:
        registry = SuggestionRegistry()
        registrar = SuggestionRegistrar(
            registry, flow_suggestion_factories(resource, FUNCTIONS, MATCHERS)
        )
        registrar.set_schema_type(SourceSchemaType.TEST)
        assert registrar.schema_type == SourceSchemaType.TEST
        assert [p.id for p in registry.providers] == [
            "flow-variables",
            "flow-functions",
            "flow-validation-matchers",
        ]
        values = [s.value for s in registry.get_suggestions("c", property_name="message")]
        assert values == ["${counter}", "citrus:randomNumber()", "citrus:concat()"]

    def test_switching_type_disposes_previous(self, resource: FlowResource) -> None:
        registry = SuggestionRegistry()
        registrar = SuggestionRegistrar(
            registry, flow_suggestion_factories(resource, FUNCTIONS, MATCHERS)
        )
        registrar.set_schema_type(SourceSchemaType.TEST)
        registrar.set_schema_type(SourceSchemaType.ROUTE)
        assert registry.providers == ()
        assert registrar.schema_type == SourceSchemaType.ROUTE

    def test_repeated_type_does_not_duplicate(self, resource: FlowResource) -> None:
        registry = SuggestionRegistry()
        registrar = SuggestionRegistrar(registry, flow_suggestion_factories(resource))
        registrar.set_schema_type(SourceSchemaType.TEST)
        registrar.set_schema_type(SourceSchemaType.TEST)
        assert len(registry.providers) == 3

    def test_default_factory(self) -> None:
        registry = SuggestionRegistry()
        registrar = SuggestionRegistrar(
            registry, {}, default_factory=lambda: [StaticSuggestionProvider("fn", FUNCTIONS)]
        )
        registrar.set_schema_type(SourceSchemaType.ROUTE)
        assert [p.id for p in registry.providers] == ["fn"]

    def test_dispose_leaves_foreign_providers(self, resource: FlowResource) -> None:
        registry = SuggestionRegistry()
        registry.register_provider(StaticSuggestionProvider("host", MATCHERS))
        registrar = SuggestionRegistrar(registry, flow_suggestion_factories(resource))
        registrar.set_schema_type(SourceSchemaType.TEST)
        registrar.dispose()
        assert [p.id for p in registry.providers] == ["host"]
