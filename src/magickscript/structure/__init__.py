"""
Script structure: the build-time factory and the immutable Context.
"""

from magickscript.structure.builder import ContextFactory
from magickscript.structure.context import Context, iter_coordinates

__all__ = [
    "Context",
    "ContextFactory",
    "iter_coordinates",
]
