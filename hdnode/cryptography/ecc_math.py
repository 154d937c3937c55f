"""
Helper functions for the modular arithmetic of elliptic curves
"""

__all__ = ["is_quadratic_residue", "modular_sqrt"]


def is_quadratic_residue(n: int, p: int) -> bool:
    """
    Euler's criterion for an odd prime p. Returns True if n is a square mod p (0 included).
    """
    n = n % p
    if n == 0:
        return True
    return pow(n, (p - 1) >> 1, p) == 1


def modular_sqrt(n: int, p: int) -> int:
    """
    Returns r with r^2 = n (mod p) for a prime p = 3 (mod 4), which covers secp256k1.
    Raises ValueError if n is not a quadratic residue.
    """
    if p & 3 != 3:
        raise ValueError("modular_sqrt requires a prime p = 3 (mod 4)")

    n = n % p
    if n == 0:
        return 0

    r = pow(n, (p + 1) >> 2, p)
    if (r * r) % p != n:
        raise ValueError("Square root called on quadratic non-residue")
    return r
