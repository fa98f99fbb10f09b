"""Shared utilities — constants and cross-cutting limits.

Rules
-----
* No business logic.
* No I/O.
* Importable by any layer.
"""
