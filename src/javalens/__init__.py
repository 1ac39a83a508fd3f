"""
javalens: Queryable Model of Java Static Analysis Output.

Loads the JSON fact-base written by the codeanalyzer tool into a
validated, immutable model of a Java codebase (files, types, methods,
call and system dependency graphs) and serves read-only queries over it.

Key Features:
- Schema validation with documented defaults
- One shared instance per method across symbol table and graphs
- Placeholder methods for graph endpoints missing from the symbol table
- Lazily built, cached query interface

Example:
    from javalens import CLDK

    analysis = CLDK("java").analysis(analysis_json="analysis.json")
    method = analysis.get_method("com.acme.Service", "run()")
"""

from javalens.analysis import JavaAnalysis
from javalens.core import CLDK
from javalens.version import __version__

__all__ = [
    "CLDK",
    "JavaAnalysis",
    "__version__",
]
