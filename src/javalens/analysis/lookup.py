"""
Callable Lookup Table.

Interns callables by (enclosing type, signature) so that every reference
to a method within one build shares a single instance.
"""

import logging

from javalens.models.symbols import JCallable

logger = logging.getLogger(__name__)


class CallableLookupTable:
    """Keyed store of canonical callables for a single build.

    Entries are first-write-wins: once a key is registered, later inserts
    for the same key are refused. A table belongs to exactly one build
    and must not be shared between builds.

    Usage:
        table = CallableLookupTable()
        table.insert("pkg.A", "run()", callable_)
        table.lookup("pkg.A", "run()") is callable_
    """

    def __init__(self) -> None:
        self._callables: dict[tuple[str, str], JCallable] = {}
        self._synthesized: set[tuple[str, str]] = set()

    def lookup(self, type_name: str, signature: str) -> JCallable | None:
        """Get the canonical callable for a key.

        Args:
            type_name: Qualified name of the enclosing type
            signature: Callable signature

        Returns:
            The registered callable, or None
        """
        return self._callables.get((type_name, signature))

    def insert(
        self,
        type_name: str,
        signature: str,
        callable_: JCallable,
        synthesized: bool = False,
    ) -> bool:
        """Register a callable unless the key is already taken.

        Args:
            type_name: Qualified name of the enclosing type
            signature: Callable signature
            callable_: Callable to register
            synthesized: Whether the callable is a placeholder

        Returns:
            True if the callable was registered, False if the key existed
        """
        key = (type_name, signature)
        if key in self._callables:
            logger.debug(f"Callable already registered, keeping first: {type_name}.{signature}")
            return False
        self._callables[key] = callable_
        if synthesized:
            self._synthesized.add(key)
        return True

    @property
    def synthesized_count(self) -> int:
        """Number of placeholder callables registered."""
        return len(self._synthesized)

    def is_synthesized(self, type_name: str, signature: str) -> bool:
        """Check if a key was registered by synthesis."""
        return (type_name, signature) in self._synthesized

    def __contains__(self, key: object) -> bool:
        return key in self._callables

    def __len__(self) -> int:
        return len(self._callables)
