"""Core type definitions for entityindex."""

type Copy[T] = T
"""Type alias indicating a value is a copy detached from index state.

When you see `Copy[T]` in a return type, the returned value is a fresh
object. Mutating it does NOT change the index. To change what is filed
under a key, use `create` / `delete`.
"""
