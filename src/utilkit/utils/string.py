"""
字符串工具函数
命名风格转换、截断/填充、模板替换与 HTML 转义
"""

from __future__ import annotations

import random
import re
from typing import Any, Mapping, Optional, Union

from ..config.defaults import RANDOM_STRING_CHARSET, TRUNCATE_DEFAULT_SUFFIX
from ..core.types import PadSide

_SEPARATOR_RE = re.compile(r'[-_\s]+(.)?')
_LOWER_UPPER_RE = re.compile(r'([a-z])([A-Z])')
_TEMPLATE_RE = re.compile(r'\{\{(\w+)\}\}')

_HTML_ESCAPES = {
    '&': '&amp;',
    '<': '&lt;',
    '>': '&gt;',
    '"': '&quot;',
    "'": '&#39;',
}
_HTML_UNESCAPES = {entity: char for char, entity in _HTML_ESCAPES.items()}
_HTML_ESCAPE_RE = re.compile(r'[&<>"\']')
_HTML_UNESCAPE_RE = re.compile(r'&(?:amp|lt|gt|quot|#39);')


# 命名风格

def capitalize(text: str) -> str:
    """首字母大写，其余小写"""
    if not text:
        return text
    return text[0].upper() + text[1:].lower()


def _join_words(text: str) -> str:
    return _SEPARATOR_RE.sub(lambda m: m.group(1).upper() if m.group(1) else '', text)


def camel_case(text: str) -> str:
    """helloWorld"""
    joined = _join_words(text)
    return joined[:1].lower() + joined[1:] if joined[:1].isupper() else joined


def pascal_case(text: str) -> str:
    """HelloWorld"""
    joined = _join_words(text)
    return joined[:1].upper() + joined[1:] if joined[:1].islower() else joined


def kebab_case(text: str) -> str:
    """hello-world"""
    text = _LOWER_UPPER_RE.sub(r'\1-\2', text)
    return re.sub(r'[\s_]+', '-', text).lower()


def snake_case(text: str) -> str:
    """hello_world"""
    text = _LOWER_UPPER_RE.sub(r'\1_\2', text)
    return re.sub(r'[\s-]+', '_', text).lower()


# 截断、去除与填充

def truncate(text: str, length: int, suffix: str = TRUNCATE_DEFAULT_SUFFIX) -> str:
    """超过 length 时截断并追加后缀"""
    if not text or len(text) <= length:
        return text
    return text[:max(length, 0)] + suffix


def trim(text: str, chars: Optional[str] = None) -> str:
    """去除两端空白，或去除 chars 中的任意字符"""
    if not chars:
        return text.strip()
    return text.strip(chars)


def pad(
    text: str,
    length: int,
    chars: str = ' ',
    side: Union[PadSide, str] = PadSide.START,
) -> str:
    """填充到指定长度

    Args:
        text: 原字符串
        length: 目标长度
        chars: 填充字符（可为多个字符，循环使用）
        side: start / end / both，both 时多出的一个字符放在右侧

    Returns:
        填充后的字符串，已达到长度时原样返回
    """
    if len(text) >= length:
        return text

    def fill(count: int) -> str:
        return (chars * count)[:count]

    pad_length = length - len(text)
    side = PadSide(side)
    if side is PadSide.START:
        return fill(pad_length) + text
    if side is PadSide.END:
        return text + fill(pad_length)
    left = pad_length // 2
    return fill(left) + text + fill(pad_length - left)


# 生成与替换

def random_string(length: int, chars: str = RANDOM_STRING_CHARSET) -> str:
    """生成随机字符串"""
    if length <= 0 or not chars:
        return ''
    return ''.join(random.choice(chars) for _ in range(length))


def template(text: str, data: Mapping[str, Any]) -> str:
    """替换 {{name}} 占位符，缺失的键保持原样"""
    return _TEMPLATE_RE.sub(
        lambda m: str(data[m.group(1)]) if m.group(1) in data else m.group(0),
        text,
    )


def escape_html(text: str) -> str:
    return _HTML_ESCAPE_RE.sub(lambda m: _HTML_ESCAPES[m.group(0)], text)


def unescape_html(text: str) -> str:
    return _HTML_UNESCAPE_RE.sub(lambda m: _HTML_UNESCAPES[m.group(0)], text)


def byte_length(text: str) -> int:
    """UTF-8 编码后的字节数（中文 3 字节）"""
    return len(text.encode('utf-8'))
