"""
javalens - Application Model and Query Layer

This module builds an immutable application model from a codeanalyzer
document and serves read-only queries over it.

Callables are interned per build: every graph edge referencing a method
shares the instance declared in the symbol table, and methods missing
from the symbol table get one shared placeholder each.

Usage:
    from javalens.analysis import JavaAnalysis

    analysis = JavaAnalysis("/path/to/analysis.json")
    for name, jtype in analysis.get_all_classes().items():
        print(name, len(jtype.callable_declarations))
"""

from javalens.analysis.builder import (
    DEFAULT_ANALYSIS_FILE,
    ApplicationBuilder,
    BuildStats,
    load_application,
    read_analysis_document,
)
from javalens.analysis.declaration import (
    CONSTRUCTOR_MARKER,
    DeclarationParser,
    SimpleDeclarationParser,
)
from javalens.analysis.errors import (
    AnalysisInputError,
    ClassNotFoundError,
    JavalensError,
    MethodNotFoundError,
    NotFoundError,
    SchemaValidationError,
)
from javalens.analysis.java_analysis import JavaAnalysis
from javalens.analysis.lookup import CallableLookupTable
from javalens.analysis.synthesis import CallableSynthesizer

__all__ = [
    # Query interface
    "JavaAnalysis",
    # Building
    "ApplicationBuilder",
    "BuildStats",
    "load_application",
    "read_analysis_document",
    "DEFAULT_ANALYSIS_FILE",
    # Resolution
    "CallableLookupTable",
    "CallableSynthesizer",
    "DeclarationParser",
    "SimpleDeclarationParser",
    "CONSTRUCTOR_MARKER",
    # Errors
    "JavalensError",
    "SchemaValidationError",
    "AnalysisInputError",
    "NotFoundError",
    "ClassNotFoundError",
    "MethodNotFoundError",
]
