import typing
from .types import *

if typing.TYPE_CHECKING:
    from .extensions.combinations import CombinationEnumerator
    from .extensions.subsequences import SubsequenceEnumerator
    from .extensions.permutations import PermutationEnumerator, SwapGenerator
    from .extensions.product import ProductEnumerator
    from .extensions.catalan import TreeShapeEnumerator

def make_combination_enumerator(source: Iterable[T], k: int) -> 'CombinationEnumerator[T]':
    """enumerator over the k-subsets of source"""
    from .extensions.combinations import CombinationEnumerator
    return CombinationEnumerator(source, k)

def make_subsequence_enumerator(source: Iterable[T]) -> 'SubsequenceEnumerator[T]':
    """enumerator over all subsequences of source"""
    from .extensions.subsequences import SubsequenceEnumerator
    return SubsequenceEnumerator(source)

def make_permutation_enumerator(source: Iterable[T],
                                swaps: Optional['SwapGenerator'] = None) -> 'PermutationEnumerator[T]':
    """enumerator over all orderings of source"""
    from .extensions.permutations import PermutationEnumerator
    return PermutationEnumerator(source, swaps)

def make_product_enumerator(source_a: Iterable[T], source_b: Iterable[U]) -> 'ProductEnumerator':
    """enumerator over the pairs of source_a x source_b, source_a varying slowest"""
    from .extensions.product import ProductEnumerator
    return ProductEnumerator(source_a, source_b)

def make_tree_shape_enumerator(leaf_count: int) -> 'TreeShapeEnumerator':
    """enumerator over the binary tree shapes with leaf_count leaves"""
    from .extensions.catalan import TreeShapeEnumerator
    return TreeShapeEnumerator(leaf_count)

# --- aliases ---
combinations = make_combination_enumerator
subsequences = make_subsequence_enumerator
permutations = make_permutation_enumerator
product = make_product_enumerator
tree_shapes = make_tree_shape_enumerator
