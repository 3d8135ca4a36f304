"""
Core value types, numerical primitives, and error taxonomy.

This module contains the foundational building blocks of the library:
the double-precision complex value type and the float helpers it relies on.
"""
