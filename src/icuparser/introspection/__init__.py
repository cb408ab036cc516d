"""Message introspection: argument type inference.

Python 3.13+.
"""

from .inference import TypeInferer, TypeMap, infer

__all__ = ["TypeInferer", "TypeMap", "infer"]
