from __future__ import annotations
from ..types import *
from ..errors import InvalidParameterError
from ..lending import LendingIterator
from .counting import catalan


class TreeShapeEnumerator(LendingIterator[int]):
    """
    lends every binary tree shape with leaf_count leaves as a label sequence.

    a shape is the sequence of its internal nodes in prefix order, each node
    labelled with the index of the leftmost leaf below it. with leaves

        0 1 2 3 4 5 6

    the labels

        0 1 2 3 3 4

    put one operator before the leaf each label names:

        + 0 + 1 + 2 + + 3 + 4 5 6  =  0 + (1 + (2 + ((3 + (4 + 5)) + 6)))

    valid sequences start at 0, never decrease and satisfy labels[t] <= t.
    enumeration starts from the right comb 0 1 2 ... n-1 and walks down to
    all zeros. from a state (j != 0, * left intact)

        0 0 0 ... 0 j * ...

    the next one is

        0 1 2 ... j-2 j-1 j-1 ... j-1 j-1 * ...

    there are choose(2n, n) / (n + 1) shapes with n + 1 leaves. once
    exhausted, stays exhausted until reset().
    """

    def __init__(self, leaf_count: int):
        if leaf_count < 1:
            raise InvalidParameterError(f"a tree needs at least one leaf, got {leaf_count}")
        self._leaf_count = leaf_count
        super().__init__(list(range(leaf_count - 1)))

    @property
    def leaf_count(self) -> int:
        return self._leaf_count

    def _restart(self) -> None:
        self._buffer[:] = range(self._leaf_count - 1)

    def _start(self) -> bool:
        return True

    def _step(self) -> bool:
        labels = self._buffer
        i = next((position for position, label in enumerate(labels) if label != 0), None)
        if i is None:
            return False
        j = labels[i]
        labels[1:j] = range(1, j)
        labels[j:i + 1] = [j - 1] * (i + 1 - j)
        return True

    def _validate(self) -> None:
        assert len(self._buffer) == self._leaf_count - 1, "label sequence changed length"
        assert is_tree_shape(self._buffer), f"invalid label sequence {self._buffer}"

    def expected_count(self) -> int:
        return catalan(self._leaf_count - 1)


def is_tree_shape(labels: Sequence[int]) -> bool:
    """true if labels encode a binary tree shape"""
    previous = 0
    for position, label in enumerate(labels):
        if label < previous or label > position:
            return False
        previous = label
    return True


def _tagged_prefix(labels: Sequence[int],
                   leaves: Optional[Sequence[Any]]) -> List[Tuple[bool, Any]]:
    """(is_operator, leaf) pairs in prefix order"""
    labels = list(labels)
    if not is_tree_shape(labels):
        raise InvalidParameterError(f"not a tree shape label sequence: {labels}")
    leaves = list(range(len(labels) + 1)) if leaves is None else list(leaves)
    if len(leaves) != len(labels) + 1:
        raise InvalidParameterError(f"{len(labels)} labels need {len(labels) + 1} leaves, got {len(leaves)}")

    tagged = []
    position = 0
    for index, leaf in enumerate(leaves):
        while position < len(labels) and labels[position] == index:
            tagged.append((True, None))
            position += 1
        tagged.append((False, leaf))
    return tagged


def to_prefix(labels: Sequence[int],
              leaves: Optional[Sequence[Any]] = None,
              operator: Any = '+') -> List[Any]:
    """prefix token list: every label becomes an operator placed before the leaf it names"""
    return [operator if is_operator else leaf for is_operator, leaf in _tagged_prefix(labels, leaves)]


def _fold(labels: Sequence[int],
          leaves: Optional[Sequence[Any]],
          join: Callable[[str, str, bool], str]) -> str:
    """
    rebuild the tree bottom-up from the prefix form.
    join(left, right, is_root) renders one internal node.
    """
    stack: List[str] = []
    for index, (is_operator, leaf) in reversed(list(enumerate(_tagged_prefix(labels, leaves)))):
        if not is_operator:
            stack.append(str(leaf))
            continue
        left = stack.pop()
        right = stack.pop()
        stack.append(join(left, right, index == 0))
    return stack[0]


def to_infix(labels: Sequence[int],
             leaves: Optional[Sequence[Any]] = None,
             operator: str = '+') -> str:
    """fully bracketed infix form, e.g. 0 + (1 + 2)"""
    def join(left: str, right: str, is_root: bool) -> str:
        text = f"{left} {operator} {right}"
        return text if is_root else f"({text})"
    return _fold(labels, leaves, join)


def to_sexpr(labels: Sequence[int],
             leaves: Optional[Sequence[Any]] = None,
             operator: str = '+') -> str:
    """lisp-style form, e.g. (+ 0 (+ 1 2))"""
    return _fold(labels, leaves, lambda left, right, _: f"({operator} {left} {right})")
