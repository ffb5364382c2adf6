"""Suggestion providers, their registry, and the per-document-type registrar.

The registry is an explicit object owned by the host application.  A
``SuggestionRegistrar`` swaps provider sets when the current document type
changes: the providers registered for the previous type are unregistered
before the new set is registered, so nothing leaks across types.

Example::

    registry = SuggestionRegistry()
    registrar = SuggestionRegistrar(registry, flow_suggestion_factories(resource))
    registrar.set_schema_type(SourceSchemaType.TEST)
    registry.get_suggestions("na", property_name="message")
    # [Suggestion(value="${name}", ...)]
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from flowtree.resource import FlowResource, SourceSchemaType

__all__ = [
    "StaticSuggestionProvider",
    "Suggestion",
    "SuggestionProvider",
    "SuggestionRegistrar",
    "SuggestionRegistry",
    "VariableSuggestionProvider",
    "flow_suggestion_factories",
]

logger = logging.getLogger(__name__)

ProviderFactory = Callable[[], Iterable["SuggestionProvider"]]


@dataclass(frozen=True, slots=True)
class Suggestion:
    """One completion candidate.

    Attributes:
        value:       Text inserted on accept, e.g. ``"${counter}"``.
        description: Human readable hint shown next to the value.
        group:       Heading the suggestion is listed under.
    """

    value: str
    description: str = ""
    group: str = ""


@runtime_checkable
class SuggestionProvider(Protocol):
    """Structural protocol for suggestion providers.

    ``applies_to`` decides from the edited property whether the provider takes
    part; ``get_suggestions`` returns candidates for the word being typed.
    """

    id: str

    def applies_to(self, property_name: str, schema: Mapping[str, Any] | None) -> bool: ...

    def get_suggestions(
        self, word: str, context: Mapping[str, Any]
    ) -> list[Suggestion]: ...


def _is_string_property(schema: Mapping[str, Any] | None) -> bool:
    return schema is None or schema.get("type", "string") == "string"


class StaticSuggestionProvider:
    """Serves a fixed list of suggestions filtered by case-insensitive prefix.

    Used for function and validation-matcher lists supplied by the catalog.
    """

    def __init__(self, provider_id: str, suggestions: Sequence[Suggestion]) -> None:
        self.id = provider_id
        self._suggestions = tuple(suggestions)

    def applies_to(self, property_name: str, schema: Mapping[str, Any] | None) -> bool:
        return _is_string_property(schema)

    def get_suggestions(self, word: str, context: Mapping[str, Any]) -> list[Suggestion]:
        needle = word.lower()
        return [s for s in self._suggestions if s.value.lower().startswith(needle)]


class VariableSuggestionProvider:
    """Suggests ``${name}`` references to the variables a flow declares.

    Variables are read from the document's ``variables`` list
    (``[{"name": ..., "value": ...}]``) on every call, so edits are picked up
    without re-registering.
    """

    id = "flow-variables"

    def __init__(self, resource: FlowResource) -> None:
        self._resource = resource

    def applies_to(self, property_name: str, schema: Mapping[str, Any] | None) -> bool:
        return _is_string_property(schema)

    def _variables(self) -> list[Mapping[str, Any]]:
        document = self._resource.to_json() or {}
        variables = document.get("variables")
        if not isinstance(variables, list):
            return []
        return [v for v in variables if isinstance(v, Mapping) and v.get("name")]

    def get_suggestions(self, word: str, context: Mapping[str, Any]) -> list[Suggestion]:
        needle = word.lower()
        return [
            Suggestion(
                value=f"${{{variable['name']}}}",
                description=str(variable.get("value", "")),
                group="Variables",
            )
            for variable in self._variables()
            if needle in str(variable["name"]).lower()
        ]


class SuggestionRegistry:
    """Ordered collection of suggestion providers keyed by provider id."""

    def __init__(self) -> None:
        self._providers: dict[str, SuggestionProvider] = {}

    @property
    def providers(self) -> tuple[SuggestionProvider, ...]:
        """Registered providers in registration order."""
        return tuple(self._providers.values())

    def register_provider(self, provider: SuggestionProvider) -> None:
        """Register ``provider``, replacing any provider with the same id."""
        if provider.id in self._providers:
            logger.debug("Replacing suggestion provider id=%s", provider.id)
        self._providers[provider.id] = provider

    def unregister_provider(self, provider_id: str) -> bool:
        """Remove the provider with ``provider_id``; False if it was not registered."""
        return self._providers.pop(provider_id, None) is not None

    def get_suggestions(
        self,
        word: str,
        property_name: str = "",
        schema: Mapping[str, Any] | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> list[Suggestion]:
        """Collect suggestions from every applicable provider, in registration order."""
        context = context or {}
        results: list[Suggestion] = []
        for provider in self._providers.values():
            if provider.applies_to(property_name, schema):
                results.extend(provider.get_suggestions(word, context))
        return results


class SuggestionRegistrar:
    """Keeps a registry's providers in step with the current document type.

    Args:
        registry:        The registry to populate.
        factories:       Mapping of document type to a factory producing that
                         type's providers.
        default_factory: Factory for types missing from ``factories``.
    """

    def __init__(
        self,
        registry: SuggestionRegistry,
        factories: Mapping[str, ProviderFactory],
        default_factory: ProviderFactory | None = None,
    ) -> None:
        self._registry = registry
        self._factories = dict(factories)
        self._default_factory = default_factory
        self._registered: list[str] = []
        self.schema_type: str | None = None

    def set_schema_type(self, schema_type: str) -> None:
        """Dispose the current providers and register the set for ``schema_type``."""
        self.dispose()
        self.schema_type = schema_type
        factory = self._factories.get(schema_type, self._default_factory)
        if factory is None:
            return
        for provider in factory():
            self._registry.register_provider(provider)
            self._registered.append(provider.id)
        logger.debug(
            "Registered suggestion providers type=%s ids=%s", schema_type, self._registered
        )

    def dispose(self) -> None:
        """Unregister every provider this registrar registered."""
        for provider_id in self._registered:
            self._registry.unregister_provider(provider_id)
        self._registered = []


def flow_suggestion_factories(
    resource: FlowResource,
    functions: Sequence[Suggestion] = (),
    validation_matchers: Sequence[Suggestion] = (),
) -> dict[str, ProviderFactory]:
    """Return registrar factories for flow documents.

    The test document type gets variable, function and validation-matcher
    providers.
    """

    def _test_providers() -> list[SuggestionProvider]:
        return [
            VariableSuggestionProvider(resource),
            StaticSuggestionProvider("flow-functions", functions),
            StaticSuggestionProvider("flow-validation-matchers", validation_matchers),
        ]

    return {SourceSchemaType.TEST: _test_providers}
