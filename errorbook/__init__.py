"""errorbook

Core package for the error book generator.

This package owns the pieces that other layers agree on:

* domain types (diagnostics, codes, groups)
* the exception taxonomy
* IO/layout rules for the generated book directory

``tools`` (external processes), ``pipeline`` (grouping, tree building,
wiring) and ``cli`` build on top of it.
"""

from __future__ import annotations
