"""
Declaration text parsing.

Graph edges carry a method's declaration text but no parameter records.
Parsers in this module recover the parameter types from that text for
methods that must be synthesized.
"""

from typing import Protocol

# Marker the analyzer uses in constructor declarations
CONSTRUCTOR_MARKER = "<init>"


class DeclarationParser(Protocol):
    """Extracts parameter information from a declaration string."""

    def parse_parameter_types(self, declaration: str) -> list[str]:
        """Return the parameter types in declaration order.

        Must not raise; unparseable text yields an empty list.
        """
        ...

    def is_constructor(self, declaration: str) -> bool:
        """Return True if the declaration names a constructor."""
        ...


class SimpleDeclarationParser:
    """Textual parser splitting the outermost parameter list on commas.

    The text between the first "(" and its matching ")" is split on
    every comma. Limitations:
    - generic types containing commas (``Map<String, Integer>``) are
      split into several entries
    - varargs keep their ``...`` suffix as part of the type
    - unbalanced parentheses yield an empty list
    """

    def parse_parameter_types(self, declaration: str) -> list[str]:
        start = declaration.find("(")
        if start == -1:
            return []

        depth = 0
        end = -1
        for index in range(start, len(declaration)):
            char = declaration[index]
            if char == "(":
                depth += 1
            elif char == ")":
                depth -= 1
                if depth == 0:
                    end = index
                    break
        if end == -1:
            return []

        inner = declaration[start + 1 : end]
        return [part.strip() for part in inner.split(",") if part.strip()]

    def is_constructor(self, declaration: str) -> bool:
        return CONSTRUCTOR_MARKER in declaration
