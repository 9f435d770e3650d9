"""Funge-space, vectors, stacks, instruction pointers, fingerprints and a debugger."""

__version__ = "1.0.0"