"""
Finite posets: creation, manipulation and analysis of finite partially
ordered sets in matrix, graph and Hasse-diagram representations.
"""

from .exceptions import PosetError, IndexOutOfRange, MalformedRelation, NotComputed
from .poset import MetaData, Known, KnownAbsent, Presence, Poset, PosetM, PosetG, PosetH
from .utils.conversion_utils import ConversionUtils
from .utils.generation_utils import GenerationUtils

__version__ = "0.1.0"

__all__ = [
    'PosetError', 'IndexOutOfRange', 'MalformedRelation', 'NotComputed',
    'MetaData', 'Known', 'KnownAbsent', 'Presence',
    'Poset', 'PosetM', 'PosetG', 'PosetH',
    'ConversionUtils', 'GenerationUtils',
]
