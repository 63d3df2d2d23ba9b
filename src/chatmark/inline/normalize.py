"""Alternate emphasis delimiters.

Chat clients and LLM replies often use underscores for emphasis. When
``ParseConfig.normalize_underscores`` is set, ``__x__`` becomes ``**x**``
and ``_x_`` becomes ``*x*`` before tokenizing. Code spans are left alone so
identifiers like ``snake_case_name`` inside backticks survive.

Underscores outside code spans are rewritten even inside words
(``a_b_c`` becomes ``a*b*c``), which is why this is opt-in.
"""

from __future__ import annotations

import re

_CODE_SPAN = re.compile(r"`[^`]+`")
_DOUBLE_UNDERSCORE = re.compile(r"__([^_]+)__")
_SINGLE_UNDERSCORE = re.compile(r"_([^_]+)_")


def normalize_underscores(text: str) -> str:
    """Rewrite underscore emphasis to the asterisk forms.

        >>> normalize_underscores("__bold__ and _it_")
        '**bold** and *it*'
        >>> normalize_underscores("`_keep_` _this_")
        '`_keep_` *this*'
    """
    if "_" not in text:
        return text

    parts: list[str] = []
    last_end = 0
    for match in _CODE_SPAN.finditer(text):
        parts.append(_rewrite(text[last_end:match.start()]))
        parts.append(match.group(0))
        last_end = match.end()
    parts.append(_rewrite(text[last_end:]))
    return "".join(parts)


def _rewrite(segment: str) -> str:
    segment = _DOUBLE_UNDERSCORE.sub(r"**\1**", segment)
    return _SINGLE_UNDERSCORE.sub(r"*\1*", segment)
