# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2026/10/19 14:48:52
# @Author : flatini contributors

"""Read and write flat INI text.

Supported syntax, one statement per line:

    ```ini
    ; whole-line comment
    [section]          ; a new section
    key = value        ; pair, spaces around `=` trimmed
    only key           ; pair with empty value
    ```

Every line is classified in one pass, in this order:
blank/comment, inline comment cut, missing key, section header,
key-value pair. The first bad line stops the parse with `IniSyntaxError`.

Notes on what is deliberately *not* smart:
1. Lines are split on `\\n` only. A trailing `\\r` is whitespace, so it
   is trimmed away together with the spaces around names and values.
2. Any line containing `[` is taken as a section header,
   i.e. `key = [x]` declares section `x`.
3. There is no escaping. `;` always starts a comment and
   a value can't contain `=`.
"""

import logging
from io import TextIOBase
from os import PathLike

import chardet

from .abstract import FileHandler
from .consts import (
    COMMENT,
    SECTION_CLOSE,
    SECTION_OPEN,
    SEPARATOR,
    ErrorKind,
    IniError,
)
from .model import IniDocument
from .serializer import dumps

__all__ = ['IniParser', 'IniSyntaxError', 'IniFileNotFound', 'loads']

_log = logging.getLogger(__name__)


class IniFileNotFound(IniError, FileNotFoundError):
    kind = ErrorKind.FILE_NOT_FOUND

    def __init__(self, filename: str) -> None:
        super().__init__(f'The file "{filename}" is not found!')
        self.filename = filename

    def __str__(self) -> str:
        return self.args[0]


class IniSyntaxError(IniError):
    """To record the first line breaking INI syntax.

    Carries the source text, or the file path if read from file,
    so that the message alone is enough to reproduce the failure.
    """
    def __init__(
        self, kind: ErrorKind, cause: str, lineno: int,
        source: str, filename: str | None = None
    ) -> None:
        self.kind = kind
        self.cause = cause
        self.lineno = lineno
        self.source = source
        self.filename = filename
        if filename is None:
            where = f'in the string\n{source}'
        else:
            where = f'in the file {filename}'
        super().__init__(f'{cause} in line {lineno} {where}')


class _LineReader:
    """Per-parse state: the section being filled and where we are."""
    def __init__(self, ins: IniDocument, source: str, filename: str | None):
        self.ins = ins
        self.source = source
        self.filename = filename
        self.lineno = 0
        self.name: str | None = None
        self.pairs: dict[str, str] = {}

    def error(self, kind: ErrorKind, cause: str) -> IniSyntaxError:
        return IniSyntaxError(
            kind, cause, self.lineno, self.source, self.filename)

    def flush(self) -> None:
        if self.name is None:
            return
        if self.name in self.ins:
            _log.warning(
                f'[{self.name}] declared more than once, '
                'the earlier one is replaced.')
        self.ins[self.name] = self.pairs

    def feed(self, line: str) -> None:
        self.lineno += 1
        stripped = line.strip()
        if not stripped or stripped.startswith(COMMENT):
            return
        actual = stripped.split(COMMENT, 1)[0]

        if actual.startswith(SEPARATOR):
            raise self.error(ErrorKind.KEY_NOT_FOUND, 'Key not found')
        elif SECTION_OPEN in actual:
            self.section(actual)
        elif self.name is not None:
            self.pair(actual)
        else:
            raise self.error(
                ErrorKind.ORPHAN_VALUE,
                'Content does not belong to any section')

    def section(self, actual: str) -> None:
        decl = actual.split(SECTION_OPEN, 1)[1]
        if SECTION_CLOSE not in decl:
            raise self.error(ErrorKind.INVALID_SECTION, 'Invalid section')
        name, _, trailing = decl.partition(SECTION_CLOSE)
        if trailing.strip():
            raise self.error(
                ErrorKind.SECTION_TRAILING_DATA,
                'Too much data for the section name')
        if not (name := name.strip()):
            raise self.error(ErrorKind.INVALID_SECTION, 'Empty section name')
        self.flush()
        self.name, self.pairs = name, {}

    def pair(self, actual: str) -> None:
        parts = actual.split(SEPARATOR)
        if len(parts) > 2:
            raise self.error(
                ErrorKind.TOO_MANY_VALUES_FOR_KEY,
                'Too many values for one key')
        key = parts[0].strip()
        self.pairs[key] = parts[1].strip() if len(parts) == 2 else ''


class IniParser(FileHandler[IniDocument]):
    def __init__(
        self, filename: str | PathLike[str], encoding: str | None = None
    ) -> None:
        super().__init__(filename, encoding)

    @staticmethod
    def readstream(
        buf: TextIOBase, ins: IniDocument | None = None, *,
        source: str | None = None, filename: str | None = None
    ) -> IniDocument:
        """Read a decoded text stream.

        `ins` gets cleared first, and cleared again if parsing fails,
        so it never holds half a document.

        Args:
            source: original text to quote in error messages.
                Defaults to the stream content.
            filename: path to quote in error messages instead of `source`.
        """
        return IniParser.readstring(
            buf.read(), ins, source=source, filename=filename)

    @staticmethod
    def readstring(
        content: str, ins: IniDocument | None = None, *,
        source: str | None = None, filename: str | None = None
    ) -> IniDocument:
        """Parse `content` into `ins` (or a new `IniDocument`).

        CAUTION:
            Raises `IniSyntaxError` on the first invalid line.
        """
        if ins is None:
            ins = IniDocument()
        ins.clear()
        reader = _LineReader(
            ins, content if source is None else source, filename)
        try:
            for line in content.split('\n'):
                reader.feed(line)
            reader.flush()
        except IniSyntaxError:
            ins.clear()
            raise
        _log.debug(f'{reader.lineno} lines read, {len(ins)} sections.')
        return ins

    @staticmethod
    def _decode_file(raw: bytes, tried: str) -> str:
        codec = chardet.detect(raw)
        if codec['encoding'] is None or codec['confidence'] < 0.8:
            # utf-8 is only worth a retry if it was not the codec that failed.
            fallback = 'latin-1' if tried.startswith('utf-8') else 'utf-8'
            _log.warning(f'Unsure of the encoding, trying {fallback}.')
            codec = {'encoding': fallback}

        # fallbacks
        try:
            return raw.decode(codec['encoding'])
        except (UnicodeDecodeError, LookupError):
            _log.warning(
                f'Unable to decode as {codec["encoding"]}, '
                'falling back to latin-1.')
            return raw.decode('latin-1')

    def read(self, ins: IniDocument | None = None) -> IniDocument:
        """Read the file this parser is bound to.

        When `encoding` is None, UTF-8 (BOM allowed) is tried first.
        If the bytes don't decode, the codec is guessed with `chardet`.
        An unsure guess means UTF-8, or latin-1 if UTF-8 already failed.

        CAUTION:
            Raises `IniFileNotFound` if the file can't be read,
            `IniSyntaxError` if its content is invalid.
            `ins` is left empty in both cases, and also when `encoding`
            names an unknown codec (`LookupError`).
        """
        try:
            with open(self._fn, 'rb') as fp:
                raw = fp.read()
        except OSError as e:
            if ins is not None:
                ins.clear()
            raise IniFileNotFound(self._fn) from e

        tried = self._codec or 'utf-8-sig'
        try:
            try:
                content = raw.decode(tried)
            except UnicodeDecodeError:
                _log.warning(
                    f'"{self._fn}" is not {tried}, guessing its encoding.')
                content = self._decode_file(raw, tried)
        except LookupError:
            if ins is not None:
                ins.clear()
            raise
        return self.readstring(content, ins, filename=self._fn)

    def write(
        self, instance: IniDocument, *,
        delimiter: str = '=', blank_lines: int = 0
    ) -> None:
        """Save `instance` to the file this parser is bound to.

        Errors while writing (`OSError`, `UnicodeEncodeError`) are raised.
        """
        text = dumps(instance, delimiter=delimiter, blank_lines=blank_lines)
        with open(self._fn, 'w', encoding=self._codec or 'utf-8',
                  newline='\n') as fp:
            fp.write(text)
        _log.debug(f'{len(instance)} sections written to "{self._fn}".')

    def __str__(self) -> str:
        return 'INI file: ' + super().__str__() + f' ({self._codec})'


def loads(content: str) -> IniDocument:
    """Parse INI text into a new `IniDocument`."""
    return IniParser.readstring(content)
