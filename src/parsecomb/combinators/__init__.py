"""Combinators: parsers built from other parsers.

Module Organization:
- transform.py: Map
- choice.py: Alt (ordered choice), Opt
- sequence.py: Delimited, Preceded, Terminated, Pair
- repetition.py: TakeWhile, TakeWhile0, TakeWhile1
- recursion.py: Lazy (recursive grammars)
"""

from parsecomb.combinators.choice import Alt, Opt
from parsecomb.combinators.recursion import Lazy
from parsecomb.combinators.repetition import TakeWhile, TakeWhile0, TakeWhile1
from parsecomb.combinators.sequence import Delimited, Pair, Preceded, Terminated
from parsecomb.combinators.transform import Map

__all__ = [
    "Alt",
    "Delimited",
    "Lazy",
    "Map",
    "Opt",
    "Pair",
    "Preceded",
    "TakeWhile",
    "TakeWhile0",
    "TakeWhile1",
    "Terminated",
]
