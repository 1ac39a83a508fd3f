"""
javalens - Java Application Data Models

This module provides Pydantic models for the records produced by the
codeanalyzer tool. All models are immutable after validation, fill in
documented defaults and ignore unknown fields.
"""

from javalens.models.application import JApplication, RawApplication
from javalens.models.base import (
    AnalysisLevel,
    CRUDOperationType,
    CRUDQueryType,
)
from javalens.models.graph import (
    JGraphEdge,
    JMethodDetail,
    MethodReference,
    RawGraphEdge,
)
from javalens.models.symbols import (
    UNKNOWN_POSITION,
    InitializationBlock,
    JCallable,
    JCallableParameter,
    JCallSite,
    JComment,
    JCompilationUnit,
    JCRUDOperation,
    JCRUDQuery,
    JEnumConstant,
    JField,
    JRecordComponent,
    JType,
    JVariableDeclaration,
)

__all__ = [
    # Base enums
    "AnalysisLevel",
    "CRUDOperationType",
    "CRUDQueryType",
    # Symbol table models
    "UNKNOWN_POSITION",
    "JComment",
    "JField",
    "JRecordComponent",
    "JEnumConstant",
    "JCallableParameter",
    "JCRUDOperation",
    "JCRUDQuery",
    "JCallSite",
    "JVariableDeclaration",
    "InitializationBlock",
    "JCallable",
    "JType",
    "JCompilationUnit",
    # Graph models
    "MethodReference",
    "JMethodDetail",
    "RawGraphEdge",
    "JGraphEdge",
    # Application models
    "RawApplication",
    "JApplication",
]
