"""Core type definitions for draftstate."""

type Draft[T] = T
"""Type alias indicating a value is a draft of a T.

A draft reads and writes like the T it wraps, so type checkers see it as one.
Writes stay pending until finalize(draft) copies them onto the original.
"""
