"""CLI layer — a reference host around the shell, and the error boundary.

This package is the outermost layer.  It may import from ``core``,
``infra`` and ``utils``, but no other layer may import from ``cli``.
"""
