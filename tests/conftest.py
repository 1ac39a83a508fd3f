"""
javalens Test Configuration and Fixtures

This module provides pytest fixtures for testing the application model.
All fixtures build analyzer documents in memory; nothing invokes the
codeanalyzer tool.

Fixture Categories:
- Record factories: Raw JSON records for callables, types and units
- Documents: Complete analyzer documents with and without graphs
- Files: Analyzer documents written to temporary files
"""

import copy
import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

# =============================================================================
# Path Fixtures
# =============================================================================


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


# =============================================================================
# Record Factories
# =============================================================================


def _callable_record(signature: str, **overrides: Any) -> dict[str, Any]:
    record = {
        "signature": signature,
        "is_implicit": False,
        "is_constructor": False,
        "comments": [],
        "annotations": [],
        "modifiers": ["public"],
        "thrown_exceptions": [],
        "declaration": f"public void {signature}",
        "parameters": [],
        "return_type": "void",
        "code": "{}",
        "start_line": 10,
        "end_line": 12,
        "referenced_types": [],
        "accessed_fields": [],
        "call_sites": [],
        "is_entrypoint": False,
        "variable_declarations": [],
        "crud_operations": None,
        "crud_queries": None,
        "cyclomatic_complexity": 1,
    }
    record.update(overrides)
    return record


def _parameter_record(name: str | None, type_: str, line: int = 10) -> dict[str, Any]:
    return {
        "name": name,
        "type": type_,
        "annotations": [],
        "modifiers": [],
        "start_line": line,
        "end_line": line,
        "start_column": 5,
        "end_column": 20,
    }


def _type_record(callables: list[dict[str, Any]] | None = None, **overrides: Any) -> dict[str, Any]:
    record = {
        "is_class_or_interface_declaration": True,
        "is_concrete_class": True,
        "modifiers": ["public"],
        "parent_type": "",
        "callable_declarations": {c["signature"]: c for c in callables or []},
        "field_declarations": [],
    }
    record.update(overrides)
    return record


def _unit_record(types: dict[str, dict[str, Any]], imports: list[str] | None = None) -> dict[str, Any]:
    return {
        "comments": [],
        "imports": imports or [],
        "type_declarations": types,
    }


def _reference(file_path: str, type_name: str, signature: str, declaration: str) -> dict[str, Any]:
    return {
        "file_path": file_path,
        "type_declaration": type_name,
        "signature": signature,
        "callable_declaration": declaration,
    }


def _edge(
    source: dict[str, Any],
    target: dict[str, Any],
    edge_type: str = "CALL_DEP",
    weight: int = 1,
) -> dict[str, Any]:
    return {"source": source, "target": target, "type": edge_type, "weight": weight}


@pytest.fixture
def make_callable() -> Callable[..., dict[str, Any]]:
    """Factory for raw callable records."""
    return _callable_record


@pytest.fixture
def make_parameter() -> Callable[..., dict[str, Any]]:
    """Factory for raw callable parameter records."""
    return _parameter_record


@pytest.fixture
def make_type() -> Callable[..., dict[str, Any]]:
    """Factory for raw type records."""
    return _type_record


@pytest.fixture
def make_unit() -> Callable[..., dict[str, Any]]:
    """Factory for raw compilation unit records."""
    return _unit_record


@pytest.fixture
def make_reference() -> Callable[..., dict[str, Any]]:
    """Factory for raw graph edge endpoints."""
    return _reference


@pytest.fixture
def make_edge() -> Callable[..., dict[str, Any]]:
    """Factory for raw graph edges."""
    return _edge


# =============================================================================
# Sample Documents
# =============================================================================

TRADE_SERVICE = "com.acme.TradeService"
QUOTE = "com.acme.Quote"
TRADE_FILE = "src/main/java/com/acme/TradeService.java"
QUOTE_FILE = "src/main/java/com/acme/Quote.java"
BUY = "buy(java.lang.String, int)"
QUOTE_SIG = "quote(java.lang.String)"
GET_PRICE = "getPrice()"
LIST_ADD = "add(java.lang.Object)"
HASHMAP_INIT = "HashMap(int, float)"


def _sample_document() -> dict[str, Any]:
    buy = _callable_record(
        BUY,
        declaration="public void buy(String symbol, int quantity)",
        parameters=[
            _parameter_record("symbol", "java.lang.String"),
            _parameter_record("quantity", "int"),
        ],
        is_entrypoint=True,
        crud_operations=[{"line_number": 11, "operation_type": "CREATE"}],
        crud_queries=[],
        cyclomatic_complexity=3,
    )
    quote = _callable_record(
        QUOTE_SIG,
        declaration="public double quote(String symbol)",
        parameters=[_parameter_record("symbol", "java.lang.String", line=20)],
        return_type="double",
        start_line=20,
        end_line=25,
    )
    constructor = _callable_record(
        "TradeService()",
        is_constructor=True,
        is_implicit=True,
        declaration="public TradeService()",
        return_type=None,
        start_line=-1,
        end_line=-1,
        code="",
    )
    get_price = _callable_record(
        GET_PRICE,
        declaration="public double getPrice()",
        return_type="double",
        start_line=5,
        end_line=5,
    )

    buy_ref = _reference(TRADE_FILE, TRADE_SERVICE, BUY, "public void buy(String symbol, int quantity)")
    quote_ref = _reference(TRADE_FILE, TRADE_SERVICE, QUOTE_SIG, "public double quote(String symbol)")
    price_ref = _reference(QUOTE_FILE, QUOTE, GET_PRICE, "public double getPrice()")
    add_ref = _reference("", "java.util.List", LIST_ADD, "boolean add(java.lang.Object)")
    hashmap_ref = _reference(
        "", "java.util.HashMap", HASHMAP_INIT, "java.util.HashMap.<init>(int, float)"
    )

    return {
        "symbol_table": {
            TRADE_FILE: _unit_record(
                {
                    TRADE_SERVICE: _type_record(
                        [constructor, buy, quote],
                        is_entrypoint_class=True,
                        annotations=["@Service"],
                    )
                },
                imports=["java.util.List", "java.util.HashMap"],
            ),
            QUOTE_FILE: _unit_record(
                {
                    QUOTE: _type_record(
                        [get_price],
                        is_record_declaration=True,
                        is_class_or_interface_declaration=False,
                    )
                }
            ),
        },
        "call_graph": [
            _edge(buy_ref, quote_ref, weight=2),
            _edge(quote_ref, price_ref),
            _edge(buy_ref, add_ref),
            _edge(quote_ref, add_ref),
            _edge(buy_ref, hashmap_ref),
        ],
        "system_dependency_graph": [
            _edge(buy_ref, quote_ref, edge_type="CONTROL_DEP"),
        ],
    }


@pytest.fixture
def sample_document() -> dict[str, Any]:
    """Analyzer document with two files, a call graph and a dependency graph.

    The call graph references java.util.List.add twice and
    java.util.HashMap's constructor once; neither is declared.
    """
    return copy.deepcopy(_sample_document())


@pytest.fixture
def symbol_table_document(sample_document: dict[str, Any]) -> dict[str, Any]:
    """Analyzer document at symbol table level (no graphs)."""
    return {"symbol_table": sample_document["symbol_table"]}


@pytest.fixture
def minimal_document() -> dict[str, Any]:
    """Smallest valid document: one file, one type, no callables."""
    return {
        "symbol_table": {
            "A.java": {
                "comments": [],
                "imports": [],
                "type_declarations": {"pkg.A": {}},
            }
        }
    }


# =============================================================================
# File Fixtures
# =============================================================================


@pytest.fixture
def analysis_dir(tmp_path: Path, sample_document: dict[str, Any]) -> Path:
    """Analyzer output directory holding analysis.json."""
    out_dir = tmp_path / "codeanalyzer-out"
    out_dir.mkdir()
    (out_dir / "analysis.json").write_text(json.dumps(sample_document))
    return out_dir


@pytest.fixture
def analysis_file(analysis_dir: Path) -> Path:
    """Path to the sample analysis.json."""
    return analysis_dir / "analysis.json"
