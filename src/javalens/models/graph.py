"""
Graph data models for call and system dependency graphs.

The analyzer emits graph edges whose endpoints only name a method
(file, type, signature, declaration text). Edges are decoded into
RawGraphEdge first and later resolved into JGraphEdge, whose endpoints
carry the canonical JCallable from the symbol table.
"""

from pydantic import Field

from javalens.models.base import FactModel
from javalens.models.symbols import JCallable


class MethodReference(FactModel):
    """Endpoint of a graph edge as written by the analyzer.

    Attributes:
        file_path: Source file declaring the method
        type_declaration: Qualified name of the enclosing type
        signature: Signature of the method within that type
        callable_declaration: Raw declaration text of the method
    """

    file_path: str
    type_declaration: str
    signature: str
    callable_declaration: str

    @property
    def key(self) -> tuple[str, str]:
        """(type name, signature) identifying the referenced callable."""
        return (self.type_declaration, self.signature)


class JMethodDetail(FactModel):
    """A callable resolved together with its enclosing type.

    Attributes:
        method_declaration: Declaration text of the callable
        klass: Qualified name of the enclosing type
        method: The canonical callable
    """

    method_declaration: str
    klass: str
    method: JCallable

    @property
    def key(self) -> tuple[str, str]:
        """(type name, signature) identifying the callable."""
        return (self.klass, self.method.signature)


class RawGraphEdge(FactModel):
    """A graph edge before its endpoints are resolved."""

    source: MethodReference
    target: MethodReference
    type: str
    weight: float
    source_kind: str | None = None
    target_kind: str | None = None


class JGraphEdge(FactModel):
    """A directed edge between two resolved callables.

    Attributes:
        source: Calling (or depending) method
        target: Called (or depended upon) method
        type: Edge kind reported by the analyzer (e.g. "CALL_DEP")
        weight: Edge weight, e.g. number of call sites
        source_kind: Analyzer specific kind of the source node
        target_kind: Analyzer specific kind of the target node
    """

    source: JMethodDetail
    target: JMethodDetail
    type: str = Field(..., description="Edge kind")
    weight: float = Field(..., description="Edge weight")
    source_kind: str | None = None
    target_kind: str | None = None
