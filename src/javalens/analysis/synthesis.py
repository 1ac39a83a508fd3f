"""
Callable Synthesizer.

Resolves graph edge endpoints to canonical callables. Endpoints naming a
method the symbol table does not declare (library methods, generated
code) get a placeholder callable built from the declaration text; the
placeholder is registered so every later reference shares it.
"""

import logging

from javalens.analysis.declaration import DeclarationParser, SimpleDeclarationParser
from javalens.analysis.lookup import CallableLookupTable
from javalens.models.graph import JMethodDetail, MethodReference
from javalens.models.symbols import UNKNOWN_POSITION, JCallable, JCallableParameter

logger = logging.getLogger(__name__)


class CallableSynthesizer:
    """Resolves method references against a lookup table.

    Resolution is total: a reference either resolves to a registered
    callable or yields a freshly registered placeholder.

    Usage:
        synthesizer = CallableSynthesizer(table)
        detail = synthesizer.resolve(reference)
    """

    def __init__(
        self,
        table: CallableLookupTable,
        parser: DeclarationParser | None = None,
    ) -> None:
        """Initialize the synthesizer.

        Args:
            table: Lookup table of the current build
            parser: Declaration parser (defaults to SimpleDeclarationParser)
        """
        self._table = table
        self._parser = parser or SimpleDeclarationParser()

    @property
    def table(self) -> CallableLookupTable:
        """Get the lookup table."""
        return self._table

    def resolve(self, reference: MethodReference) -> JMethodDetail:
        """Resolve an edge endpoint to a method detail.

        Args:
            reference: Endpoint as written by the analyzer

        Returns:
            JMethodDetail wrapping the canonical callable
        """
        callable_ = self._table.lookup(reference.type_declaration, reference.signature)

        if callable_ is None:
            callable_ = self.synthesize(reference)
            self._table.insert(
                reference.type_declaration,
                reference.signature,
                callable_,
                synthesized=True,
            )
            logger.debug(
                f"Synthesized placeholder for {reference.type_declaration}.{reference.signature}"
            )

        return JMethodDetail(
            method_declaration=callable_.declaration,
            klass=reference.type_declaration,
            method=callable_,
        )

    def synthesize(self, reference: MethodReference) -> JCallable:
        """Build a placeholder callable from a reference's declaration text.

        Args:
            reference: Endpoint as written by the analyzer

        Returns:
            An implicit callable with unknown source positions
        """
        declaration = reference.callable_declaration
        parameters = [
            JCallableParameter(
                name=None,
                type=parameter_type,
                annotations=[],
                modifiers=[],
                start_line=UNKNOWN_POSITION,
                end_line=UNKNOWN_POSITION,
                start_column=UNKNOWN_POSITION,
                end_column=UNKNOWN_POSITION,
            )
            for parameter_type in self._parser.parse_parameter_types(declaration)
        ]

        return JCallable(
            signature=reference.signature,
            is_implicit=True,
            is_constructor=self._parser.is_constructor(declaration),
            comments=[],
            annotations=[],
            modifiers=[],
            thrown_exceptions=[],
            declaration="",
            parameters=parameters,
            return_type=None,
            code="",
            start_line=UNKNOWN_POSITION,
            end_line=UNKNOWN_POSITION,
            referenced_types=[],
            accessed_fields=[],
            call_sites=[],
            is_entrypoint=False,
            variable_declarations=[],
            crud_operations=None,
            crud_queries=None,
            cyclomatic_complexity=0,
        )
