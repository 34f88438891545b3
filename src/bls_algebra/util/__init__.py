"""util package.

Modules:
    - utility_functions: Number-theoretic helpers (primality, extended Euclidean algorithm, factorisation).
"""
