# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2026/10/19 14:10:27
# @Author : flatini contributors

"""
Flat INI structure: a document of sections, each a dict of `str: str`.

```ini
[owner]
name = John Doe  ; inline comment

[database]
server = 192.0.2.62
only key
```

Not thread-safe. Guard an `IniDocument` shared between threads yourself.
"""

from collections.abc import MutableMapping
from os import PathLike
from typing import Iterator

from .consts import ErrorKind, IniError
from .serializer import dumps


class SectionNotFound(IniError, KeyError):
    kind = ErrorKind.SECTION_NOT_FOUND

    def __init__(self, section: str) -> None:
        super().__init__(section)
        self.section = section

    def __str__(self) -> str:
        return f'Section {self.section} not found'


class KeyNotFound(IniError, KeyError):
    """Raised by `IniDocument.get_value()` for a missing *or empty* key."""
    kind = ErrorKind.KEY_NOT_FOUND

    def __init__(self, section: str, key: str) -> None:
        super().__init__(key)
        self.section = section
        self.key = key

    def __str__(self) -> str:
        return f'No value found for the key {self.key}'


class IniSection(MutableMapping[str, str]):
    """Key-value pairs of one section.

    Sections taken from an `IniDocument` share storage with it,
    so writes here show up in the document (and in its output).
    """
    def __init__(self, name: str, data: dict[str, str] | None = None) -> None:
        self._name = name
        self._data: dict[str, str] = {} if data is None else data

    @property
    def name(self) -> str:
        return self._name

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __setitem__(self, key: str, value: str) -> None:
        self._data[key] = value

    def __delitem__(self, key: str) -> None:
        del self._data[key]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __str__(self) -> str:
        return f'[{self._name}]'

    def __repr__(self) -> str:
        return '[%s] %r' % (self._name, self._data)

    def to_dict(self) -> dict[str, str]:
        return self._data.copy()


class IniDocument(MutableMapping[str, IniSection]):
    """A whole INI file: section name -> `IniSection`.

    Apart from the mapping protocol, it provides the lookup API below:

        ```python
        doc = IniDocument()
        doc.load_string('[database]\\nserver = 192.0.2.62\\n')
        doc.get_value('database', 'server')   # '192.0.2.62'
        doc.set_value('owner', 'name', 'John Doe')  # creates [owner]
        print(doc)  # serialized back to INI text
        ```
    """
    def __init__(self) -> None:
        self.__raw: dict[str, dict[str, str]] = {}

    def __getitem__(self, key: str) -> IniSection:
        return IniSection(key, self.__raw[key])

    def __setitem__(
        self, key: str, value: IniSection | dict[str, str]
    ) -> None:
        # shouldn't keep ptr to external dict in section setting.
        self.__raw[key] = (
            value.to_dict()
            if isinstance(value, IniSection)
            else dict(value)
        )

    def __delitem__(self, key: str) -> None:
        del self.__raw[key]

    def __contains__(self, key: object) -> bool:
        return key in self.__raw

    def __len__(self) -> int:
        return len(self.__raw)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__raw)

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self.__raw!r})'

    def __str__(self) -> str:
        return dumps(self)

    def clear(self) -> None:
        self.__raw.clear()

    def get_value(self, section: str, key: str) -> str:
        """Get value of `key` in `section`.

        CAUTION:
            An empty value is reported the same way as a missing key
            (`KeyNotFound`). Use `has_key()` to tell the two apart.
        """
        if section not in self.__raw:
            raise SectionNotFound(section)
        value = self.__raw[section].get(key, '')
        if value == '':
            raise KeyNotFound(section, key)
        return value

    def has_key(self, section: str, key: str) -> bool:
        """Whether `key` is present in `section`, even with empty value."""
        return section in self.__raw and key in self.__raw[section]

    def set_value(self, section: str, key: str, value: str) -> None:
        """Set `key` in `section` to `value`, creating `section` if needed.

        Nothing is validated here. Keys or values with `;`, `=`, brackets
        or line breaks are kept but won't read back the same from file.
        """
        self.__raw.setdefault(section, {})[key] = value

    def section_names(self) -> list[str]:
        return list(self.__raw)

    def sections(self) -> dict[str, dict[str, str]]:
        """Snapshot of every section and its pairs, as plain dicts."""
        return {k: v.copy() for k, v in self.__raw.items()}

    def load_string(self, content: str) -> None:
        """Replace the content by parsing `content`.

        On `IniSyntaxError` the document is left empty.
        """
        from .parser import IniParser
        IniParser.readstring(content, self)

    def load_file(
        self, filename: str | PathLike[str], encoding: str | None = None
    ) -> None:
        """Replace the content by parsing the file at `filename`.

        On `IniFileNotFound` or `IniSyntaxError` the document is left empty.
        """
        from .parser import IniParser
        IniParser(filename, encoding).read(self)

    def save_file(
        self, filename: str | PathLike[str], encoding: str = 'utf-8', *,
        delimiter: str = '=', blank_lines: int = 0
    ) -> None:
        from .parser import IniParser
        IniParser(filename, encoding).write(
            self, delimiter=delimiter, blank_lines=blank_lines)
