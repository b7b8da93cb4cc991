"""
属性文件格式解析

解析Java风格的 key=value 属性文本：
- 以 # 或 ! 开头的行为注释
- 键与值之间以 =、: 或空白分隔
- 行尾奇数个反斜杠表示续行
- 支持 \\t \\n \\r \\f 和 \\uXXXX 转义
"""

import re
import string
from pathlib import Path
from typing import Dict, Iterator, Tuple, Union

_WHITESPACE = " \t\f"
_SEPARATORS = "=:"
_ESCAPES = {'t': '\t', 'n': '\n', 'r': '\r', 'f': '\f'}
_NEWLINE = re.compile(r'\r\n|\r|\n')

# Java Properties 默认编码
PROPERTIES_ENCODING = "latin-1"


class PropertiesFormatError(ValueError):
    """属性文本格式错误"""


def _continues(line: str) -> bool:
    """行尾是否有奇数个反斜杠"""
    count = len(line) - len(line.rstrip('\\'))
    return count % 2 == 1


def _logical_lines(text: str) -> Iterator[str]:
    """合并续行并跳过空行和注释行"""
    pending = None
    for natural in _NEWLINE.split(text):
        line = natural.lstrip(_WHITESPACE)
        if pending is None and (not line or line[0] in "#!"):
            continue
        if _continues(line):
            pending = (pending or "") + line[:-1]
            continue
        yield (pending or "") + line
        pending = None

    if pending is not None:
        yield pending


def _split(line: str) -> Tuple[str, str]:
    """拆分键和值（均未反转义）"""
    index = 0
    length = len(line)
    separator_found = False
    while index < length:
        char = line[index]
        if char == '\\':
            index += 2
            continue
        if char in _SEPARATORS:
            separator_found = True
            break
        if char in _WHITESPACE:
            break
        index += 1
    else:
        return line, ""

    key = line[:index]
    value = line[index + 1:].lstrip(_WHITESPACE)
    if not separator_found and value[:1] and value[0] in _SEPARATORS:
        value = value[1:].lstrip(_WHITESPACE)
    return key, value


def _unescape(text: str) -> str:
    chars = []
    index = 0
    length = len(text)
    while index < length:
        char = text[index]
        index += 1
        if char != '\\':
            chars.append(char)
            continue
        if index >= length:
            break

        char = text[index]
        index += 1
        if char == 'u':
            digits = text[index:index + 4]
            if len(digits) != 4 or any(d not in string.hexdigits for d in digits):
                raise PropertiesFormatError(f"无效的\\uXXXX转义: \\u{digits}")
            chars.append(chr(int(digits, 16)))
            index += 4
        else:
            chars.append(_ESCAPES.get(char, char))
    return "".join(chars)


def parse_properties(text: str) -> Dict[str, str]:
    """解析属性文本，重复的键以后出现的为准"""
    properties: Dict[str, str] = {}
    for line in _logical_lines(text):
        key, value = _split(line)
        properties[_unescape(key)] = _unescape(value)
    return properties


def load_properties(path: Union[str, Path]) -> Dict[str, str]:
    """读取并解析属性文件

    Raises:
        OSError: 文件无法读取
        PropertiesFormatError: 文件内容格式错误
    """
    with open(path, 'r', encoding=PROPERTIES_ENCODING, newline='') as f:
        return parse_properties(f.read())
