"""
SVG Document Module
===================
Collects serialized shape fragments against one layout and writes the
finished SVG document.
"""

import os
import stat
import tempfile
import contextlib
from typing import List, Optional

from typing_extensions import Self

from simple_svg.models.layout import Layout
from simple_svg.models.shape import Shape
from simple_svg.utils.logger import get_logger, log_exception
from simple_svg.utils.markup import attribute, elem_end, format_length

logger = get_logger(__name__)

XML_DECLARATION = '<?xml version="1.0" standalone="no"?>\n'
SVG_DOCTYPE = (
    '<!DOCTYPE svg PUBLIC "-//W3C//DTD SVG 1.1//EN" '
    '"http://www.w3.org/Graphics/SVG/1.1/DTD/svg11.dtd">\n'
)
SVG_NAMESPACE = "http://www.w3.org/2000/svg"
FILE_MODE = 0o666


def _target_mode(filepath: str) -> int:
    """
    Permission bits for the saved file.

    An existing file keeps its mode; a new one gets FILE_MODE minus the umask.
    """
    try:
        return stat.S_IMODE(os.stat(filepath).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return FILE_MODE & ~umask


class Document:
    """
    An SVG document built by appending shapes.

    Shapes are serialized the moment they are appended and only the
    resulting markup is kept ("serialize-on-append"). Changing a shape
    after appending it does not change the document.
    """

    def __init__(self, file_name: str, layout: Optional[Layout] = None):
        """
        Initialize the document.

        Args:
            file_name: Destination path used by save()
            layout: Layout applied to every appended shape
        """
        self.file_name = file_name
        self.layout = layout if layout is not None else Layout()
        self._fragments: List[str] = []

    def append(self, shape: Shape) -> Self:
        """
        Serialize a shape with the document layout and add it to the body.

        Later shapes are drawn on top of earlier ones.

        Args:
            shape: Shape to add

        Returns:
            Self for method chaining
        """
        fragment = shape.serialize(self.layout)
        self._fragments.append(fragment)
        logger.debug(f"Appended {shape.shape_type.value} ({len(fragment)} chars) to {self.file_name}")
        return self

    @property
    def body(self) -> str:
        """Accumulated markup of every appended shape."""
        return "".join(self._fragments)

    def __len__(self) -> int:
        return len(self._fragments)

    def render(self) -> str:
        """
        Produce the complete SVG document.

        Returns:
            Document text
        """
        dimensions = self.layout.dimensions
        return (
            XML_DECLARATION +
            SVG_DOCTYPE +
            "<svg " +
            attribute("width", format_length(dimensions.width), "px") +
            attribute("height", format_length(dimensions.height), "px") +
            attribute("xmlns", SVG_NAMESPACE) +
            attribute("version", "1.1") +
            ">\n" +
            self.body +
            elem_end("svg")
        )

    def save(self, file_name: Optional[str] = None) -> bool:
        """
        Write the rendered document to disk.

        The text goes to a temporary file next to the destination and is
        then moved into place, so the destination is either fully written
        or left untouched.

        Args:
            file_name: Destination path; defaults to the document's file name

        Returns:
            True on success, False if the file could not be written
        """
        filepath = file_name or self.file_name
        directory = os.path.dirname(os.path.abspath(filepath))

        try:
            payload = self.render().encode("utf-8")
        except UnicodeEncodeError as e:
            log_exception(logger, e, context={"file": filepath})
            return False

        try:
            fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".simple_svg_", suffix=".tmp")
        except OSError as e:
            log_exception(logger, e, context={"file": filepath})
            return False

        try:
            with os.fdopen(fd, "wb") as f:
                f.write(payload)
            os.chmod(tmp_path, _target_mode(filepath))
            os.replace(tmp_path, filepath)
        except OSError as e:
            with contextlib.suppress(OSError):
                os.unlink(tmp_path)
            log_exception(logger, e, context={"file": filepath})
            return False

        logger.info(f"SVG saved to {filepath}")
        return True

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Document({self.file_name!r}, shapes={len(self._fragments)})"
