# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2026/10/19 14:02:11
# @Author : flatini contributors

from enum import Enum

COMMENT = ';'
SECTION_OPEN = '['
SECTION_CLOSE = ']'
SEPARATOR = '='

# won't survive a write-then-read cycle if found in keys or values.
UNSAFE_CHARS = (COMMENT, SEPARATOR, SECTION_OPEN, SECTION_CLOSE, '\n')


class ErrorKind(str, Enum):
    FILE_NOT_FOUND = 'FileNotFound'
    # syntax
    KEY_NOT_FOUND = 'KeyNotFound'
    INVALID_SECTION = 'InvalidSection'
    SECTION_TRAILING_DATA = 'SectionTrailingData'
    TOO_MANY_VALUES_FOR_KEY = 'TooManyValuesForKey'
    ORPHAN_VALUE = 'OrphanValue'
    # lookup
    SECTION_NOT_FOUND = 'SectionNotFound'


class IniError(Exception):
    """Base of everything `flatini` raises on purpose."""
    kind: ErrorKind
