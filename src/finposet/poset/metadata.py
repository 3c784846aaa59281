"""
Element and metadata model shared by every poset representation.

The metadata caches facts that are derived from the order relation (top,
bottom, minimal and maximal elements). A field set to ``None`` has never been
computed. Top and bottom hold a ``Presence``: either ``Known(element)`` or
``KnownAbsent``, the latter meaning the poset provably has no such element.
"""

import enum
from dataclasses import dataclass
from typing import FrozenSet, Iterable, Optional, Union


@dataclass(frozen=True)
class Known:
    """A top or bottom element that was found."""
    element: int

    def __repr__(self) -> str:
        return f"Known({self.element})"


class Absence(enum.Enum):
    KNOWN_ABSENT = "known_absent"

    def __repr__(self) -> str:
        return "KnownAbsent"


KnownAbsent = Absence.KNOWN_ABSENT

Presence = Union[Known, Absence]


def presence_from(candidates: Iterable[int]) -> Presence:
    """
    Turn a collection of candidates into a Presence.

    Exactly one candidate means the element is known, anything else means it
    provably does not exist.
    """
    candidates = list(candidates)
    if len(candidates) == 1:
        return Known(candidates[0])
    return KnownAbsent


@dataclass
class MetaData:
    """
    Derived facts about a poset of ``n`` elements.

    Parameters:
    -----------
    n : int
        Size of the underlying set.
    top, bot : Optional[Presence]
        Unique maximum / minimum, ``None`` when not computed.
    minimals, maximals : Optional[FrozenSet[int]]
        Minimal / maximal elements, ``None`` when not computed.
    """
    n: int
    top: Optional[Presence] = None
    bot: Optional[Presence] = None
    minimals: Optional[FrozenSet[int]] = None
    maximals: Optional[FrozenSet[int]] = None

