"""Identitrace - Outline occupancy grids as minimal SVG paths.

Identitrace turns a boolean N×N occupancy grid into one closed vector path per
connected region, with enclosed holes bridged into the same path. On top of
that geometry engine it builds GitHub-style identicons: the grid is derived
from a hash of the input text, mirrored for symmetry, coloured from the hash
and serialized as a compact SVG document.

Example:
    $ identitrace alice@example.com -o alice.svg

    >>> from identitrace import generate
    >>> svg = generate("alice@example.com", size=6, background="basic")
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

from identitrace.core.processor import generate  # noqa: E402

__all__ = ["__author__", "__version__", "generate"]
