"""Number theory and combinatorics: modular arithmetic, divisors, primes and expected inversions."""

__version__ = "0.1.0"
__all__ = ["__version__"]