"""
simple_svg - Utilities Package
==============================
Logging setup and markup formatting helpers.
"""

from simple_svg.utils.logger import (
    setup_logger, get_logger, log_exception, LogCapture
)
from simple_svg.utils.markup import (
    format_number, attribute, elem_start, elem_end, empty_elem_end
)

__all__ = [
    'setup_logger', 'get_logger', 'log_exception', 'LogCapture',
    'format_number', 'attribute', 'elem_start', 'elem_end', 'empty_elem_end'
]
