"""
Exceptions raised by the poset representations and convertors.
"""


class PosetError(Exception):
    """Base class for all poset errors."""


class IndexOutOfRange(PosetError, IndexError):
    """An element argument is not part of the poset's universe."""

    def __init__(self, element, universe_size: int):
        self.element = element
        self.universe_size = universe_size
        super().__init__(f"Element {element!r} is not in a poset of {universe_size} elements.")


class MalformedRelation(PosetError, ValueError):
    """A raw relation payload is not a partial order."""


class NotComputed(PosetError, LookupError):
    """A metadata field was read before its find_* method ran."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"'{field}' has not been computed yet; call find_{field}() first.")
