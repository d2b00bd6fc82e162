# -*- encoding: utf-8 -*-
# @File   : serializer.py
# @Time   : 2026/10/19 14:31:05
# @Author : flatini contributors

from collections.abc import Mapping
from warnings import warn

from .consts import SECTION_CLOSE, SECTION_OPEN, SEPARATOR, UNSAFE_CHARS

__all__ = ['dumps', 'dump_section']


def _check_delimiter(delimiter: str) -> None:
    # `key : value` and friends won't read back.
    if delimiter.strip(' ') != SEPARATOR:
        raise ValueError(
            f'delimiter must be "{SEPARATOR}" optionally padded '
            f'with spaces, got {delimiter!r}')


def _unsafe(text: str) -> bool:
    # surrounding whitespace gets trimmed when read.
    return text != text.strip() or any(c in text for c in UNSAFE_CHARS)


def dump_section(
    name: str, pairs: Mapping[str, str], delimiter: str = '='
) -> str:
    """Render one section: its `[name]` line, then a line per pair."""
    _check_delimiter(delimiter)
    if _unsafe(name) or not name:
        warn(f'Section name {name!r} will not read back the same.')
    ret = f'{SECTION_OPEN}{name}{SECTION_CLOSE}\n'
    for k, v in pairs.items():
        if not k or _unsafe(k) or _unsafe(v):
            warn(f'[{name}] {k!r} = {v!r} will not read back the same.')
        ret += f'{k}{delimiter}{v}\n'
    return ret


def dumps(
    doc: Mapping[str, Mapping[str, str]], *,
    delimiter: str = '=', blank_lines: int = 0
) -> str:
    """Render a whole document as INI text.

    Args:
        delimiter: how to connect key with value?
            Only `=` with optional spaces around is accepted.
        blank_lines: how many empty lines after each section?

    Hint:
        Reading the output back gives an equal document, except that
        an empty value still reads as "missing" via `get_value()`.
    """
    _check_delimiter(delimiter)
    if blank_lines < 0:
        raise ValueError(f'blank_lines must not be negative: {blank_lines}')
    return ''.join(
        dump_section(name, pairs, delimiter) + '\n' * blank_lines
        for name, pairs in doc.items()
    )
