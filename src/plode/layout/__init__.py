"""
Layout data types.

Engines produce these; renderers consume them:
- ScatterLayout: node positions of a single step
- ScatterLayoutSequence: node positions of every simulation step
"""

from .scatter import ScatterLayout, ScatterLayoutSequence

__all__ = [
    "ScatterLayout",
    "ScatterLayoutSequence",
]
