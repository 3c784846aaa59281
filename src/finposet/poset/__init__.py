"""
The three representations of a finite poset.
"""

from .metadata import MetaData, Known, KnownAbsent, Presence
from .base import Poset
from .matrix import PosetM
from .graph import PosetG
from .hasse import PosetH

__all__ = ['MetaData', 'Known', 'KnownAbsent', 'Presence', 'Poset', 'PosetM', 'PosetG', 'PosetH']
