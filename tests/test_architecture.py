"""Architectural boundary tests using pytest-archon.

These tests verify that the codebase follows clean architecture principles:
- Domain layer has no dependencies on adapters
- Domain models don't depend on contracts
- Adapters can depend on domain
"""

from pytest_archon import archrule


def test_domain_models_have_no_dependencies() -> None:
    """Domain models should not import any other modules except standard library and domain itself."""
    (
        archrule("domain models", comment="Domain models should be independent")
        .match("train_departures.domain.models*")
        .should_not_import("train_departures.adapters*")
        .should_not_import("train_departures.domain.contracts*")
        .should_not_import("train_departures.main")
        .may_import("train_departures.domain.models*")
        .check("train_departures")
    )


def test_domain_contracts_have_no_dependencies() -> None:
    """Domain contracts (protocols) should not import adapters."""
    (
        archrule("domain contracts", comment="Domain contracts should be independent")
        .match("train_departures.domain.contracts*")
        .should_not_import("train_departures.adapters*")
        .should_not_import("train_departures.main")
        .may_import("train_departures.domain.contracts*")
        .may_import("train_departures.domain.models*")
        .check("train_departures")
    )


def test_adapters_dont_import_entry_point() -> None:
    """Adapters should not import the entry point (to avoid cycles)."""
    (
        archrule("adapters independence", comment="Adapters should not depend on main")
        .match("train_departures.adapters*")
        .should_not_import("train_departures.main")
        .may_import("train_departures.domain*")
        .may_import("train_departures.adapters*")
        .check("train_departures", only_direct_imports=True)
    )
