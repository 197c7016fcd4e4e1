"""
QML Core: simulated quantum machine-learning building blocks.

This package provides generic pieces that know nothing about transactions:
- Algorithm descriptors (closed set of four simulated quantum models)
- Angle encoder
- Scoring strategies
- Binary-classification metrics
- Error taxonomy and logging setup

Callers import concrete names directly from the submodules, e.g.:

    from qml_core.qml_scoring import score_batch
"""

__all__ = []
