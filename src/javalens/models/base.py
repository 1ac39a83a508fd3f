"""
Base enumerations and shared model configuration.

These enums provide the closed value sets the analyzer output is
validated against.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class CRUDOperationType(str, Enum):
    """Kind of persistence operation observed at a call site."""

    CREATE = "CREATE"
    READ = "READ"
    UPDATE = "UPDATE"
    DELETE = "DELETE"


class CRUDQueryType(str, Enum):
    """Kind of persistence query observed at a call site."""

    READ = "READ"
    WRITE = "WRITE"
    NAMED = "NAMED"


class AnalysisLevel(str, Enum):
    """Depth of analysis requested from the analyzer.

    The values match the ``--analysis-level`` argument of the
    codeanalyzer tool.
    """

    SYMBOL_TABLE = "1"
    CALL_GRAPH = "2"
    SYSTEM_DEPENDENCY_GRAPH = "3"

    @classmethod
    def from_name(cls, name: "str | AnalysisLevel") -> "AnalysisLevel":
        """Map a human readable level name to a level.

        Numeric values ("1".."3") are accepted as well. Unknown names
        fall back to SYMBOL_TABLE.

        Args:
            name: Level name such as "Call Graph", or a level

        Returns:
            The matching AnalysisLevel
        """
        if isinstance(name, AnalysisLevel):
            return name
        key = str(name).strip().lower()
        if key in ANALYSIS_LEVEL_NAMES:
            return ANALYSIS_LEVEL_NAMES[key]
        try:
            return cls(key)
        except ValueError:
            return cls.SYMBOL_TABLE

    @property
    def includes_call_graph(self) -> bool:
        """True if this level asks for a call graph."""
        return self in (AnalysisLevel.CALL_GRAPH, AnalysisLevel.SYSTEM_DEPENDENCY_GRAPH)

    @property
    def includes_system_dependency_graph(self) -> bool:
        """True if this level asks for a system dependency graph."""
        return self is AnalysisLevel.SYSTEM_DEPENDENCY_GRAPH


ANALYSIS_LEVEL_NAMES: dict[str, AnalysisLevel] = {
    "symbol table": AnalysisLevel.SYMBOL_TABLE,
    "call graph": AnalysisLevel.CALL_GRAPH,
    "system dependency graph": AnalysisLevel.SYSTEM_DEPENDENCY_GRAPH,
}


class FactModel(BaseModel):
    """Base class for every decoded analyzer record.

    Records are immutable once decoded and tolerate fields added by
    newer analyzer versions.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")
