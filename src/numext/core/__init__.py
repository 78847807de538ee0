"""
Core numeric primitives, flag operations, and value types.

Every function here is pure and synchronous: no I/O, no shared state.
"""
