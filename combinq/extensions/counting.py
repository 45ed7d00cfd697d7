import math


def choose(n: int, k: int) -> int:
    """binomial coefficient n choose k, 0 outside 0 <= k <= n"""
    # math.comb raises valueerror for negative arguments. return 0 for consistency.
    if n < 0 or k < 0:
        return 0
    return math.comb(n, k)


def factorial(n: int) -> int:
    """number of orderings of n items"""
    if n < 0:
        return 0
    return math.factorial(n)


def power_set_size(n: int) -> int:
    """number of subsequences of n items, the empty one included"""
    if n < 0:
        return 0
    return 2 ** n


def catalan(n: int) -> int:
    """number of binary tree shapes with n + 1 leaves"""
    if n < 0:
        return 0
    return math.comb(2 * n, n) // (n + 1)
