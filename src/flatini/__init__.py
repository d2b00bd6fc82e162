# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/19 15:20:36
# @Author : flatini contributors

"""Reader/writer for flat INI files: `[section]`, `key = value`, `;comment`.

```python
from flatini import IniDocument

doc = IniDocument()
doc.load_file('settings.ini')
doc.set_value('database', 'server', '192.0.2.62')
doc.save_file('settings.ini')
```
"""

from .consts import ErrorKind, IniError
from .model import IniDocument, IniSection, KeyNotFound, SectionNotFound
from .parser import IniFileNotFound, IniParser, IniSyntaxError, loads
from .serializer import dump_section, dumps

__all__ = [
    'IniDocument', 'IniSection', 'IniParser',
    'loads', 'dumps', 'dump_section',
    'ErrorKind', 'IniError', 'IniSyntaxError', 'IniFileNotFound',
    'SectionNotFound', 'KeyNotFound',
]
