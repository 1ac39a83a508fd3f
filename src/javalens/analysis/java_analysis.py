"""
Java Analysis query interface.

Provides read-only views over an application model. The model is built
on first access and cached for the lifetime of the JavaAnalysis instance.
"""

import logging
import threading
from collections.abc import Mapping
from pathlib import Path
from typing import Any, overload

from javalens.analysis.builder import DEFAULT_ANALYSIS_FILE, ApplicationBuilder, load_application
from javalens.analysis.errors import ClassNotFoundError, MethodNotFoundError
from javalens.models.application import JApplication
from javalens.models.base import AnalysisLevel
from javalens.models.graph import JGraphEdge, JMethodDetail
from javalens.models.symbols import JCallable, JCallableParameter, JCompilationUnit, JType

logger = logging.getLogger(__name__)

ApplicationSource = JApplication | Mapping[str, Any] | str | Path


class JavaAnalysis:
    """Query interface over a Java application model.

    The source may be an already built JApplication, a decoded analyzer
    document, or a path to an analyzer JSON file (or its output
    directory). Building happens lazily on the first query; later queries
    reuse the cached model.

    Usage:
        analysis = JavaAnalysis("/tmp/out/analysis.json", analysis_level="call graph")

        classes = analysis.get_all_classes()
        method = analysis.get_method("com.acme.Service", "run(java.lang.String)")
        callees = analysis.get_callees("com.acme.Service", "run(java.lang.String)")
    """

    def __init__(
        self,
        source: ApplicationSource,
        analysis_level: str | AnalysisLevel = AnalysisLevel.SYMBOL_TABLE,
        analysis_file: str = DEFAULT_ANALYSIS_FILE,
    ) -> None:
        """Initialize the analysis.

        Args:
            source: Application model, decoded document or path to one
            analysis_level: Requested analysis depth (name or level)
            analysis_file: File name looked up when source is a directory
        """
        self._source = source
        self._analysis_level = AnalysisLevel.from_name(analysis_level)
        self._analysis_file = analysis_file
        self._application: JApplication | None = None
        self._classes: dict[str, JType] | None = None
        self._lock = threading.Lock()

    @property
    def analysis_level(self) -> AnalysisLevel:
        """Get the requested analysis level."""
        return self._analysis_level

    @property
    def is_built(self) -> bool:
        """Check if the application model has been built."""
        return self._application is not None

    def get_application(self) -> JApplication:
        """Get the application model, building it on first access.

        Returns:
            The cached JApplication

        Raises:
            SchemaValidationError: If the source document is invalid
            AnalysisInputError: If the source file cannot be read
        """
        if self._application is None:
            with self._lock:
                if self._application is None:
                    self._application = self._build()
        return self._application

    def _build(self) -> JApplication:
        """Build the application model from the configured source."""
        if isinstance(self._source, JApplication):
            return self._source
        if isinstance(self._source, (str, Path)):
            return load_application(self._source, self._analysis_file)
        return ApplicationBuilder().build(self._source)

    def get_symbol_table(self) -> dict[str, JCompilationUnit]:
        """Get the symbol table (file path -> compilation unit)."""
        return dict(self.get_application().symbol_table)

    def get_all_classes(self) -> dict[str, JType]:
        """Get every type declared in the application.

        When two compilation units declare the same qualified name, the
        unit appearing first in the symbol table wins and a warning is
        logged. The builder interns callables under the same rule, so graph
        edges and method lookups share instances.

        Returns:
            Qualified name -> type
        """
        if self._classes is None:
            classes: dict[str, JType] = {}
            declared_in: dict[str, str] = {}
            for file_path, type_name, jtype in self.get_application().iter_types():
                if type_name in declared_in:
                    logger.warning(
                        f"Type {type_name} declared in both {declared_in[type_name]} "
                        f"and {file_path}; using the former"
                    )
                    continue
                classes[type_name] = jtype
                declared_in[type_name] = file_path
            self._classes = classes
        return dict(self._classes)

    def get_class(self, qualified_name: str) -> JType:
        """Get a type by qualified name.

        Raises:
            ClassNotFoundError: If no compilation unit declares the type
        """
        self.get_all_classes()
        try:
            return self._classes[qualified_name]
        except KeyError:
            raise ClassNotFoundError(qualified_name) from None

    def get_all_methods(self) -> dict[str, dict[str, JCallable]]:
        """Get the callables of every type.

        Returns:
            Qualified type name -> (signature -> callable)
        """
        return {
            type_name: dict(jtype.callable_declarations)
            for type_name, jtype in self.get_all_classes().items()
        }

    def get_methods_of_class(self, qualified_name: str) -> list[JCallable]:
        """Get the callables declared by a type.

        Raises:
            ClassNotFoundError: If the type does not exist
        """
        return list(self.get_class(qualified_name).callable_declarations.values())

    def get_method(self, qualified_name: str, signature: str) -> JCallable:
        """Get a callable by exact signature.

        Args:
            qualified_name: Qualified name of the enclosing type
            signature: Exact callable signature

        Returns:
            The matching callable

        Raises:
            MethodNotFoundError: If the type or signature does not exist
        """
        try:
            jtype = self.get_class(qualified_name)
        except ClassNotFoundError:
            raise MethodNotFoundError(qualified_name, signature) from None

        callable_ = jtype.callable_declarations.get(signature)
        if callable_ is None:
            raise MethodNotFoundError(qualified_name, signature)
        return callable_

    @overload
    def get_parameters(self, target: JCallable) -> list[JCallableParameter]: ...

    @overload
    def get_parameters(self, target: str, signature: str) -> list[JCallableParameter]: ...

    def get_parameters(
        self,
        target: str | JCallable,
        signature: str | None = None,
    ) -> list[JCallableParameter]:
        """Get the parameters of a callable.

        Args:
            target: A callable, or the qualified name of its enclosing type
            signature: Callable signature, required when target is a type name

        Raises:
            MethodNotFoundError: If the named callable does not exist
        """
        if isinstance(target, JCallable):
            return list(target.parameters)
        if signature is None:
            raise TypeError("signature is required when a type name is given")
        return list(self.get_method(target, signature).parameters)

    def get_file_path(self, qualified_name: str) -> str:
        """Get the path of the first file declaring a type.

        Raises:
            ClassNotFoundError: If no compilation unit declares the type
        """
        for file_path, unit in self.get_symbol_table().items():
            if qualified_name in unit.type_declarations:
                return file_path
        raise ClassNotFoundError(qualified_name)

    def get_call_graph(self) -> list[JGraphEdge]:
        """Get call graph edges (empty if the document has none)."""
        return self._graph(self.get_application().call_graph, "call graph")

    def get_system_dependency_graph(self) -> list[JGraphEdge]:
        """Get system dependency graph edges (empty if the document has none)."""
        return self._graph(
            self.get_application().system_dependency_graph, "system dependency graph"
        )

    def _graph(self, edges: list[JGraphEdge] | None, name: str) -> list[JGraphEdge]:
        if edges is None:
            logger.warning(f"Analysis document has no {name}")
            return []
        if self._analysis_level is AnalysisLevel.SYMBOL_TABLE:
            logger.warning(f"Querying {name} at analysis level {self._analysis_level.name}")
        return list(edges)

    def get_callees(self, qualified_name: str, signature: str) -> list[JMethodDetail]:
        """Get the methods called by a method, in call graph order."""
        return [
            edge.target
            for edge in self.get_call_graph()
            if edge.source.key == (qualified_name, signature)
        ]

    def get_callers(self, qualified_name: str, signature: str) -> list[JMethodDetail]:
        """Get the methods calling a method, in call graph order."""
        return [
            edge.source
            for edge in self.get_call_graph()
            if edge.target.key == (qualified_name, signature)
        ]

    def get_entrypoint_classes(self) -> dict[str, JType]:
        """Get types flagged as service entry points."""
        return {
            type_name: jtype
            for type_name, jtype in self.get_all_classes().items()
            if jtype.is_entrypoint_class
        }

    def get_entrypoint_methods(self) -> dict[str, dict[str, JCallable]]:
        """Get callables flagged as service entry points, grouped by type.

        Types without entry point callables are omitted.
        """
        entrypoints: dict[str, dict[str, JCallable]] = {}
        for type_name, callables in self.get_all_methods().items():
            selected = {
                signature: callable_
                for signature, callable_ in callables.items()
                if callable_.is_entrypoint
            }
            if selected:
                entrypoints[type_name] = selected
        return entrypoints
