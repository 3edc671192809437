"""
Core domain models, numerical algorithms, and data contracts.

This package is pure computation: it performs no terminal or file I/O.
"""
