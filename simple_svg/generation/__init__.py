"""
simple_svg - Generation Package
===============================
Assembles serialized shapes into complete SVG documents.
"""

from simple_svg.generation.document import Document

__all__ = [
    "Document"
]
