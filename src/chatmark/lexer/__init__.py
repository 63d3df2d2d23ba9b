"""Line classification for the chatmark block parser.

lexer/
├── __init__.py          # Re-exports ParserMode and the classifiers
├── modes.py             # ParserMode enum
└── classifiers.py       # One predicate/extractor per block kind

Every classifier looks at a single source line (no trailing newline) and
never raises.
"""

from chatmark.lexer.classifiers import (
    classify_heading,
    fence_language,
    is_blank,
    is_horizontal_rule,
    is_table_row,
    is_table_separator,
    match_bullet,
    match_numbered,
    split_table_cells,
)
from chatmark.lexer.modes import ParserMode

__all__ = [
    "ParserMode",
    "classify_heading",
    "fence_language",
    "is_blank",
    "is_horizontal_rule",
    "is_table_row",
    "is_table_separator",
    "match_bullet",
    "match_numbered",
    "split_table_cells",
]
