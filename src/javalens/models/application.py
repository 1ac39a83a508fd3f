"""
Application data models: the aggregate root of an analysis.
"""

from collections.abc import Iterator

from pydantic import Field, computed_field

from javalens.models.base import FactModel
from javalens.models.graph import JGraphEdge, RawGraphEdge
from javalens.models.symbols import JCallable, JCompilationUnit, JType


class RawApplication(FactModel):
    """The analyzer document as decoded, before graph resolution.

    Attributes:
        symbol_table: File path -> compilation unit
        call_graph: Unresolved call graph edges, if analyzed
        system_dependency_graph: Unresolved dependency edges, if analyzed
    """

    symbol_table: dict[str, JCompilationUnit]
    call_graph: list[RawGraphEdge] | None = None
    system_dependency_graph: list[RawGraphEdge] | None = None


class JApplication(FactModel):
    """A fully resolved, immutable model of a Java application.

    Every callable referenced by a graph edge is the same object as the
    one reachable through the symbol table (or a shared placeholder if
    the symbol table does not declare it).

    Attributes:
        symbol_table: File path -> compilation unit
        call_graph: Resolved call graph, None if not analyzed
        system_dependency_graph: Resolved dependency graph, None if not analyzed
    """

    symbol_table: dict[str, JCompilationUnit] = Field(
        ..., description="File path -> compilation unit"
    )
    call_graph: list[JGraphEdge] | None = Field(
        default=None, description="Call graph edges in analyzer order"
    )
    system_dependency_graph: list[JGraphEdge] | None = Field(
        default=None, description="System dependency graph edges in analyzer order"
    )

    @computed_field
    @property
    def type_count(self) -> int:
        """Total number of type declarations across all files."""
        return sum(len(unit.type_declarations) for unit in self.symbol_table.values())

    def iter_types(self) -> Iterator[tuple[str, str, JType]]:
        """Iterate over (file path, qualified name, type) in symbol table order."""
        for file_path, unit in self.symbol_table.items():
            for type_name, jtype in unit.type_declarations.items():
                yield file_path, type_name, jtype

    def iter_callables(self) -> Iterator[tuple[str, JCallable]]:
        """Iterate over (qualified type name, callable) for declared callables."""
        for _, type_name, jtype in self.iter_types():
            for callable_ in jtype.callable_declarations.values():
                yield type_name, callable_
