""" Resolution of enumerated codes and bit masks into labels.

    All tables are immutable constant data, resolvers are pure. Unknown codes
    are never errors, they resolve to fallback label of the table. """

from .types import Label
MYPY=False
if MYPY:
    from typing import Tuple, Optional, Union, Callable, Iterator, List, Sequence
    Resolver = Callable[[int], Label]

__all__ = ["DenseEnum", "SparseEnum", "RangeEnum", "FlagTable", "bits"]

def bits(value): # type: (int) -> Iterator[int]
    """ Positions of set bits, in ascending order. """
    pos = 0
    while value:
        if value & 1:
            yield pos
        value >>= 1
        pos += 1

class DenseEnum(object):
    """ Labels of consecutive codes, first label belongs to code `base`.
        None in labels marks reserved code. """
    labels   = None # type: Tuple[Optional[str], ...]
    base     = None # type: int
    fallback = None # type: str

    def __init__(self, labels, base = 1, fallback = "Reserved"): # type: (Sequence[Optional[str]], int, str) -> None
        self.labels   = tuple(labels)
        self.base     = base
        self.fallback = fallback

    def __call__(self, code): # type: (int) -> Label
        i = code - self.base
        if 0 <= i < len(self.labels):
            label = self.labels[i]
            if label is not None:
                return Label(label, code)
        return Label(self.fallback, code)

class SparseEnum(object):
    """ Labels of (code, label) pairs, looked up by linear scan. """
    pairs    = None # type: Tuple[Tuple[int, str], ...]
    fallback = None # type: str

    def __init__(self, pairs, fallback = "Reserved"): # type: (Sequence[Tuple[int, str]], str) -> None
        self.pairs    = tuple(pairs)
        self.fallback = fallback

    def __call__(self, code): # type: (int) -> Label
        for c, label in self.pairs:
            if c == code:
                return Label(label, code)
        return Label(self.fallback, code)

class RangeEnum(object):
    """ Disjoint inclusive ranges of codes. Each range is resolved either by
        another resolver or by a single label shared by all codes in range. """
    ranges   = None # type: Tuple[Tuple[int, int, Union[str, Resolver]], ...]
    fallback = None # type: str

    def __init__(self, ranges, fallback = "Reserved"): # type: (Sequence[Tuple[int, int, Union[str, Resolver]]], str) -> None
        self.ranges   = tuple(ranges)
        self.fallback = fallback
        prev = None # type: Optional[int]
        for lo, hi, _ in sorted(self.ranges, key=lambda r: r[0]):
            assert lo <= hi
            assert prev is None or lo > prev, "overlapping ranges"
            prev = hi

    def __call__(self, code): # type: (int) -> Label
        for lo, hi, r in self.ranges:
            if lo <= code <= hi:
                if isinstance(r, str):
                    return Label(r, code)
                return r(code)
        return Label(self.fallback, code)

class FlagTable(object):
    """ Bit mask with named bits. Resolves to list of labels of set bits in
        ascending bit order, bits without label are omitted. """
    names = None # type: Tuple[Tuple[int, str], ...]

    def __init__(self, names, first_bit = 0): # type: (Sequence[Union[str, None, Tuple[int, str]]], int) -> None
        pairs = [] # type: List[Tuple[int, str]]
        for i, n in enumerate(names):
            if n is None:
                continue
            if isinstance(n, tuple):
                pairs.append(n)
            else:
                pairs.append((first_bit + i, n))
        pairs.sort()
        self.names = tuple(pairs)

    def __call__(self, value): # type: (int) -> List[Label]
        lookup = dict(self.names)
        return [Label(lookup[b], b) for b in bits(value) if b in lookup]
