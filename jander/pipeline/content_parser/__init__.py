"""Content parser pipeline package.

Public API for turning frontmatter content files into ordered
``ContentRecord`` values: capture extraction and binding, field
normalizers, the two-pass parser, directory loading and ordering.

A consumer (the elm generator runner, the CLI, tests) should import from this
package rather than reaching into submodules.
"""

from .captures import bind_fields, extract_captures
from .loader import find_content_files, load_content, parse_content_files
from .normalizers import derive_identifier, escape_body, normalize_date, normalize_tags
from .ordering import order_records
from .parser import parse_content, parse_content_file
from .records import ContentRecord, build_record
from .result import Err, Ok, Result

__all__ = [
    "ContentRecord",
    "Err",
    "Ok",
    "Result",
    "bind_fields",
    "build_record",
    "derive_identifier",
    "escape_body",
    "extract_captures",
    "find_content_files",
    "load_content",
    "normalize_date",
    "normalize_tags",
    "order_records",
    "parse_content",
    "parse_content_file",
    "parse_content_files",
]
