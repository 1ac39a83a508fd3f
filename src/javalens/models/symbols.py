"""
Symbol table data models for representing Java source entities.

These models mirror the records emitted by the codeanalyzer tool for a
single compilation unit: comments, fields, callables, types and the
facts attached to them. Optional fields are filled with the analyzer's
documented defaults; unknown fields are ignored.
"""

from typing import Any

from pydantic import Field

from javalens.models.base import CRUDOperationType, CRUDQueryType, FactModel

# Line and column value used when a source span is unknown
UNKNOWN_POSITION = -1


class JComment(FactModel):
    """A comment in Java source code.

    Attributes:
        content: Comment text, if captured
        start_line: First line of the comment
        end_line: Last line of the comment
        start_column: Starting column
        end_column: Ending column
        is_javadoc: Whether this is a Javadoc comment
    """

    content: str | None = Field(default=None, description="Comment text")
    start_line: int = Field(default=UNKNOWN_POSITION, description="First line")
    end_line: int = Field(default=UNKNOWN_POSITION, description="Last line")
    start_column: int = Field(default=UNKNOWN_POSITION, description="Starting column")
    end_column: int = Field(default=UNKNOWN_POSITION, description="Ending column")
    is_javadoc: bool = Field(default=False, description="Javadoc comment flag")


class JRecordComponent(FactModel):
    """A component of a Java record declaration."""

    comment: JComment | None = None
    name: str
    type: str
    modifiers: list[str]
    annotations: list[str]
    default_value: Any = None
    is_var_args: bool


class JField(FactModel):
    """A field declaration, possibly declaring several variables.

    Attributes:
        comment: Comment attached to the declaration
        type: Declared type
        start_line: First line of the declaration
        end_line: Last line of the declaration
        variables: Names of the declared variables
        modifiers: Modifiers such as private or static
        annotations: Annotations on the declaration
    """

    comment: JComment | None = None
    type: str
    start_line: int
    end_line: int
    variables: list[str]
    modifiers: list[str]
    annotations: list[str]


class JCallableParameter(FactModel):
    """A formal parameter of a method or constructor.

    The name is None for parameters recovered from declaration text only.
    """

    name: str | None = None
    type: str
    annotations: list[str]
    modifiers: list[str]
    start_line: int
    end_line: int
    start_column: int
    end_column: int


class JEnumConstant(FactModel):
    """A constant of an enum declaration."""

    name: str
    arguments: list[str]


class JCRUDOperation(FactModel):
    """A persistence operation detected at a given line."""

    line_number: int
    operation_type: CRUDOperationType | None = None


class JCRUDQuery(FactModel):
    """A persistence query detected at a given line."""

    line_number: int
    query_arguments: list[str] | None = None
    query_type: CRUDQueryType | None = None


class JCallSite(FactModel):
    """A method invocation inside a callable or initializer.

    Attributes:
        comment: Comment attached to the call
        method_name: Name of the invoked method
        receiver_expr: Expression of the receiver ("" if none)
        receiver_type: Type declaring the invoked method
        argument_types: Types of the actual arguments
        return_type: Resolved type of the call expression, "" if unresolved
        callee_signature: Signature of the callee ("" if unresolved)
        is_static_call: Whether the call is static
        is_private: Whether the callee is private
        is_public: Whether the callee is public
        is_protected: Whether the callee is protected
        is_unspecified: Whether the callee has package access
        is_constructor_call: Whether this is an object creation
        crud_operation: CRUD operation tag, if any
        crud_query: CRUD query tag, if any
    """

    comment: JComment | None = None
    method_name: str
    receiver_expr: str = ""
    receiver_type: str
    argument_types: list[str]
    return_type: str = ""
    callee_signature: str = ""
    is_static_call: bool | None
    is_private: bool | None
    is_public: bool | None
    is_protected: bool | None
    is_unspecified: bool | None
    is_constructor_call: bool
    crud_operation: JCRUDOperation | None
    crud_query: JCRUDQuery | None
    start_line: int
    start_column: int
    end_line: int
    end_column: int


class JVariableDeclaration(FactModel):
    """A local variable declaration."""

    comment: JComment | None = None
    name: str
    type: str
    initializer: str
    start_line: int
    start_column: int
    end_line: int
    end_column: int


class InitializationBlock(FactModel):
    """An instance or static initializer block of a type."""

    file_path: str
    comments: list[JComment]
    annotations: list[str]
    thrown_exceptions: list[str]
    code: str
    start_line: int
    end_line: int
    is_static: bool
    referenced_types: list[str]
    accessed_fields: list[str]
    call_sites: list[JCallSite]
    variable_declarations: list[JVariableDeclaration]
    cyclomatic_complexity: int


class JCallable(FactModel):
    """A method or constructor.

    A callable is identified by its signature, which is unique within
    the enclosing type. Implicit callables are either compiler-generated
    (e.g. default constructors) or placeholders synthesized for methods
    that appear in a graph but not in the symbol table.

    Attributes:
        signature: Signature, unique within the enclosing type
        is_implicit: Whether the callable is implicit or synthesized
        is_constructor: Whether the callable is a constructor
        comments: Comments attached to the callable
        annotations: Annotations on the callable
        modifiers: Modifiers such as public or static
        thrown_exceptions: Exceptions declared via "throws"
        declaration: Declaration text
        parameters: Formal parameters
        return_type: Return type, None for constructors
        code: Body source text
        start_line: First line
        end_line: Last line
        referenced_types: Types referenced in the body
        accessed_fields: Fields accessed in the body
        call_sites: Invocations made by the body
        is_entrypoint: Whether this is a service entry point
        variable_declarations: Local variable declarations
        crud_operations: CRUD operations, None if not analyzed
        crud_queries: CRUD queries, None if not analyzed
        cyclomatic_complexity: Cyclomatic complexity, None if not computed
    """

    signature: str = Field(..., description="Signature unique within the type")
    is_implicit: bool
    is_constructor: bool
    comments: list[JComment]
    annotations: list[str]
    modifiers: list[str]
    thrown_exceptions: list[str] = Field(default_factory=list)
    declaration: str
    parameters: list[JCallableParameter]
    return_type: str | None
    code: str
    start_line: int
    end_line: int
    referenced_types: list[str]
    accessed_fields: list[str]
    call_sites: list[JCallSite]
    is_entrypoint: bool = False
    variable_declarations: list[JVariableDeclaration]
    crud_operations: list[JCRUDOperation] | None = None
    crud_queries: list[JCRUDQuery] | None = None
    cyclomatic_complexity: int | None = None


class JType(FactModel):
    """A class, interface, enum, record or annotation declaration.

    Attributes:
        is_interface: Interface declaration
        is_inner_class: Non-static nested class
        is_local_class: Class declared inside a method
        is_nested_type: Declared inside another type
        is_class_or_interface_declaration: Class or interface declaration
        is_enum_declaration: Enum declaration
        is_annotation_declaration: Annotation declaration
        is_record_declaration: Record declaration
        is_concrete_class: Concrete (non-abstract) class
        is_entrypoint_class: Service entry point class
        comments: Comments attached to the type
        extends_list: Extended types
        implements_list: Implemented interfaces
        modifiers: Modifiers of the declaration
        annotations: Annotations of the declaration
        parent_type: Enclosing type for nested types ("" if top level)
        nested_type_declarations: Qualified names of nested types
        callable_declarations: Signature -> callable for methods and constructors
        field_declarations: Field declarations
        enum_constants: Enum constants
        record_components: Record components
        initialization_blocks: Initializer blocks
    """

    is_interface: bool = False
    is_inner_class: bool = False
    is_local_class: bool = False
    is_nested_type: bool = False
    is_class_or_interface_declaration: bool = False
    is_enum_declaration: bool = False
    is_annotation_declaration: bool = False
    is_record_declaration: bool = False
    is_concrete_class: bool = False
    is_entrypoint_class: bool = False
    comments: list[JComment] | None = Field(default_factory=list)
    extends_list: list[str] | None = Field(default_factory=list)
    implements_list: list[str] | None = Field(default_factory=list)
    modifiers: list[str] | None = Field(default_factory=list)
    annotations: list[str] | None = Field(default_factory=list)
    parent_type: str = ""
    nested_type_declarations: list[str] | None = Field(default_factory=list)
    callable_declarations: dict[str, JCallable] = Field(default_factory=dict)
    field_declarations: list[JField] = Field(default_factory=list)
    enum_constants: list[JEnumConstant] | None = Field(default_factory=list)
    record_components: list[JRecordComponent] | None = Field(default_factory=list)
    initialization_blocks: list[InitializationBlock] | None = Field(default_factory=list)


class JCompilationUnit(FactModel):
    """One Java source file.

    Attributes:
        comments: File-level comments
        imports: Import statements
        type_declarations: Qualified name -> declared type
        is_modified: Whether the unit was modified after analysis
    """

    comments: list[JComment]
    imports: list[str]
    type_declarations: dict[str, JType]
    is_modified: bool = False
