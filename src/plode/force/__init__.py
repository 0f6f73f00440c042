"""
Force-directed layout engines.

- FruchtermanReingold: Classic force-directed placement with linear cooling
"""

from .fruchterman_reingold import FruchtermanReingold

__all__ = [
    "FruchtermanReingold",
]
