"""
Application Builder.

Turns an analyzer document into an immutable JApplication. The build
runs in three strictly ordered steps:

1. Validate the whole document (no interning happens on failure)
2. Register every callable declared in the symbol table
3. Resolve call graph and system dependency graph edges

Declared callables are registered before any edge is resolved, so a
declaration always wins over a synthesized placeholder.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from javalens.analysis.declaration import DeclarationParser
from javalens.analysis.errors import AnalysisInputError, SchemaValidationError
from javalens.analysis.lookup import CallableLookupTable
from javalens.analysis.synthesis import CallableSynthesizer
from javalens.models.application import JApplication, RawApplication
from javalens.models.graph import JGraphEdge, RawGraphEdge

logger = logging.getLogger(__name__)

# File name the codeanalyzer writes into its output directory
DEFAULT_ANALYSIS_FILE = "analysis.json"


@dataclass
class BuildStats:
    """Statistics from a build.

    Attributes:
        files: Compilation units ingested
        types: Type declarations ingested
        callables: Callables registered from the symbol table
        call_graph_edges: Call graph edges resolved
        dependency_edges: System dependency graph edges resolved
        synthesized: Placeholder callables created during edge resolution
    """

    files: int = 0
    types: int = 0
    callables: int = 0
    call_graph_edges: int = 0
    dependency_edges: int = 0
    synthesized: int = 0


class ApplicationBuilder:
    """Builds JApplication models from analyzer documents.

    Every call to build() uses its own lookup table, so independent
    builds never share callables.

    Usage:
        builder = ApplicationBuilder()
        application = builder.build(document)
        print(builder.last_stats)
    """

    def __init__(self, parser: DeclarationParser | None = None) -> None:
        """Initialize the builder.

        Args:
            parser: Declaration parser used for placeholder synthesis
        """
        self._parser = parser
        self._last_stats: BuildStats | None = None

    @property
    def last_stats(self) -> BuildStats | None:
        """Statistics of the most recent successful build."""
        return self._last_stats

    def build(self, document: Any) -> JApplication:
        """Build an application model from a decoded analyzer document.

        Args:
            document: Decoded JSON document

        Returns:
            Immutable application model

        Raises:
            SchemaValidationError: If the document does not match the schema
        """
        try:
            raw = RawApplication.model_validate(document)
        except ValidationError as e:
            raise SchemaValidationError.from_pydantic(e) from e

        stats = BuildStats()
        table = CallableLookupTable()
        self._ingest_symbol_table(raw, table, stats)

        synthesizer = CallableSynthesizer(table, self._parser)
        call_graph = self._resolve_edges(raw.call_graph, synthesizer)
        dependency_graph = self._resolve_edges(raw.system_dependency_graph, synthesizer)

        stats.call_graph_edges = len(call_graph or [])
        stats.dependency_edges = len(dependency_graph or [])
        stats.synthesized = table.synthesized_count

        application = JApplication(
            symbol_table=raw.symbol_table,
            call_graph=call_graph,
            system_dependency_graph=dependency_graph,
        )
        self._last_stats = stats

        logger.info(
            f"Built application: {stats.files} files, {stats.types} types, "
            f"{stats.callables} callables, {stats.call_graph_edges} call edges, "
            f"{stats.dependency_edges} dependency edges, "
            f"{stats.synthesized} synthesized callables"
        )
        return application

    def _ingest_symbol_table(
        self,
        raw: RawApplication,
        table: CallableLookupTable,
        stats: BuildStats,
    ) -> None:
        """Register every declared callable under its enclosing type.

        A qualified name declared by several compilation units resolves to
        the first unit in symbol table order; callables of later
        declarations are not registered.
        """
        declared_in: dict[str, str] = {}
        for file_path, unit in raw.symbol_table.items():
            stats.files += 1
            for type_name, jtype in unit.type_declarations.items():
                stats.types += 1
                if type_name in declared_in:
                    logger.warning(
                        f"Duplicate type {type_name} in {file_path}; keeping the "
                        f"declaration from {declared_in[type_name]}"
                    )
                    continue
                declared_in[type_name] = file_path
                for callable_ in jtype.callable_declarations.values():
                    stats.callables += 1
                    table.insert(type_name, callable_.signature, callable_)

    def _resolve_edges(
        self,
        edges: list[RawGraphEdge] | None,
        synthesizer: CallableSynthesizer,
    ) -> list[JGraphEdge] | None:
        """Resolve both endpoints of every edge, preserving order."""
        if edges is None:
            return None
        return [
            JGraphEdge(
                source=synthesizer.resolve(edge.source),
                target=synthesizer.resolve(edge.target),
                type=edge.type,
                weight=edge.weight,
                source_kind=edge.source_kind,
                target_kind=edge.target_kind,
            )
            for edge in edges
        ]


def read_analysis_document(
    path: str | Path,
    analysis_file: str = DEFAULT_ANALYSIS_FILE,
) -> Any:
    """Read and decode an analyzer JSON document.

    Args:
        path: Path to the JSON file, or to the analyzer output directory
        analysis_file: File name looked up when path is a directory

    Returns:
        Decoded JSON document

    Raises:
        AnalysisInputError: If the file is missing or is not valid JSON
    """
    path = Path(path)
    if path.is_dir():
        path = path / analysis_file

    if not path.exists():
        raise AnalysisInputError("Analysis file not found", path=path)

    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise AnalysisInputError(f"Invalid JSON: {e}", path=path) from e
    except OSError as e:
        raise AnalysisInputError(f"Cannot read analysis file: {e}", path=path) from e


def load_application(
    path: str | Path,
    analysis_file: str = DEFAULT_ANALYSIS_FILE,
    parser: DeclarationParser | None = None,
) -> JApplication:
    """Read an analyzer JSON file and build its application model.

    Args:
        path: Path to the JSON file, or to the analyzer output directory
        analysis_file: File name looked up when path is a directory
        parser: Declaration parser used for placeholder synthesis

    Returns:
        Immutable application model

    Raises:
        AnalysisInputError: If the file cannot be read
        SchemaValidationError: If the document does not match the schema
    """
    document = read_analysis_document(path, analysis_file)
    logger.info(f"Loaded analysis document from {path}")
    return ApplicationBuilder(parser).build(document)
