"""
   ___ ___  _ __ ___ | |__ (_)_ __   __ _
  / __/ _ \| '_ ` _ \| '_ \| | '_ \ / _` |
 | (_| (_) | | | | | | |_) | | | | | (_| |
  \___\___/|_| |_| |_|_.__/|_|_| |_|\__, |
                                       |_|
"""

# expose the lending contract
from .lending import LendingIterator
from .types import View, Phase, IDENTITY

# expose the factory functions
from .factories import (
    make_combination_enumerator,
    make_subsequence_enumerator,
    make_permutation_enumerator,
    make_product_enumerator,
    make_tree_shape_enumerator,
    # short aliases
    combinations,
    subsequences,
    permutations,
    product,
    tree_shapes
)

# expose the enumerator families
from .extensions.combinations import CombinationEnumerator
from .extensions.subsequences import SubsequenceEnumerator
from .extensions.permutations import PermutationEnumerator, SwapGenerator, ElementSwaps
from .extensions.product import ProductEnumerator
from .extensions.catalan import TreeShapeEnumerator, is_tree_shape, to_prefix, to_infix, to_sexpr
from .extensions.counting import choose, factorial, power_set_size, catalan

# expose configuration and errors
from .config import LendingConfig, get_config, configure, configured
from .errors import CombinqError, InvalidParameterError, StaleViewError, OneShotSourceError

# define what `import *` does
__all__ = [
    "LendingIterator",
    "View",
    "Phase",
    "IDENTITY",
    "make_combination_enumerator",
    "make_subsequence_enumerator",
    "make_permutation_enumerator",
    "make_product_enumerator",
    "make_tree_shape_enumerator",
    "combinations",
    "subsequences",
    "permutations",
    "product",
    "tree_shapes",
    "CombinationEnumerator",
    "SubsequenceEnumerator",
    "PermutationEnumerator",
    "SwapGenerator",
    "ElementSwaps",
    "ProductEnumerator",
    "TreeShapeEnumerator",
    "is_tree_shape",
    "to_prefix",
    "to_infix",
    "to_sexpr",
    "choose",
    "factorial",
    "power_set_size",
    "catalan",
    "LendingConfig",
    "get_config",
    "configure",
    "configured",
    "CombinqError",
    "InvalidParameterError",
    "StaleViewError",
    "OneShotSourceError"
]
