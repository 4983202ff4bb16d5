"""
输入校验函数
格式类校验只做正则/校验位检查，不访问网络
"""

from __future__ import annotations

import math
import re
from typing import Any, Optional
from urllib.parse import urlsplit

from ..config.defaults import PASSWORD_MAX_STRENGTH
from ..core.models import PasswordStrengthOptions
from .dates import to_datetime

_EMAIL_RE = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')
_PHONE_RE = re.compile(r'^1[3-9]\d{9}$')
_ID_CARD_RE = re.compile(
    r'(^[1-9]\d{5}(18|19|([23]\d))\d{2}((0[1-9])|(10|11|12))(([0-2][1-9])|10|20|30|31)\d{3}[0-9Xx]$)'
    r'|(^[1-9]\d{5}\d{2}((0[1-9])|(10|11|12))(([0-2][1-9])|10|20|30|31)\d{3}$)'
)
_IPV4_RE = re.compile(
    r'^(?:(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)\.){3}(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)$'
)
# 仅支持完整的 8 段 IPv6，不支持 :: 缩写
_IPV6_RE = re.compile(r'^(?:[0-9a-fA-F]{1,4}:){7}[0-9a-fA-F]{1,4}$')
_SYMBOL_RE = re.compile(r'[!@#$%^&*(),.?":{}|<>]')
_HEX_COLOR_RE = re.compile(r'^#([A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})$')
_QQ_RE = re.compile(r'^[1-9][0-9]{4,10}$')
_WECHAT_RE = re.compile(r'^[a-zA-Z][-_a-zA-Z0-9]{5,19}$')

_PROVINCES = '京津沪渝冀豫云辽黑湘皖鲁新苏浙赣鄂桂甘晋蒙陕吉闽贵粤青藏川宁琼使领'
_PLATE_RE = re.compile(rf'^[{_PROVINCES}][A-Z][A-Z0-9]{{4}}[A-Z0-9挂学警港澳]$')
_NEW_ENERGY_PLATE_RE = re.compile(rf'^[{_PROVINCES}][A-Z][A-Z0-9]{{6}}$')

_DATE_FORMAT_TOKENS = (
    ('YYYY', r'\d{4}'),
    ('MM', r'\d{2}'),
    ('DD', r'\d{2}'),
    ('HH', r'\d{2}'),
    ('mm', r'\d{2}'),
    ('ss', r'\d{2}'),
)


def _matches(pattern: re.Pattern, value: Any) -> bool:
    return isinstance(value, str) and pattern.fullmatch(value) is not None


# 联系方式与证件

def is_email(email: str) -> bool:
    return _matches(_EMAIL_RE, email)


def is_phone(phone: str) -> bool:
    """中国大陆手机号"""
    return _matches(_PHONE_RE, phone)


def is_id_card(id_card: str) -> bool:
    """中国大陆身份证号（18 位或 15 位）"""
    return _matches(_ID_CARD_RE, id_card)


def is_qq(qq: str) -> bool:
    return _matches(_QQ_RE, qq)


def is_wechat(wechat: str) -> bool:
    """微信号：字母开头，6-20 位字母、数字、下划线或减号"""
    return _matches(_WECHAT_RE, wechat)


def is_plate_number(plate_number: str) -> bool:
    """中国车牌号（普通与新能源）"""
    return _matches(_PLATE_RE, plate_number) or _matches(_NEW_ENERGY_PLATE_RE, plate_number)


# 网络

def is_url(url: str) -> bool:
    """需要同时包含协议与主机"""
    if not isinstance(url, str) or not url or any(c.isspace() for c in url):
        return False
    try:
        parts = urlsplit(url)
    except ValueError:
        return False
    return bool(parts.scheme) and bool(parts.netloc)


def is_ip(ip: str) -> bool:
    return _matches(_IPV4_RE, ip) or _matches(_IPV6_RE, ip)


# 密码

def get_password_strength(password: str, options: Optional[PasswordStrengthOptions] = None) -> int:
    """密码强度 0-4

    长度、小写、大写、数字、特殊字符每满足一项加一分（未要求的项直接计分），
    最高为 4。
    """
    opts = options or PasswordStrengthOptions()

    strength = 0

    # 长度检查
    if len(password) >= opts.min_length:
        strength += 1

    # 小写字母
    if not opts.require_lowercase or re.search(r'[a-z]', password):
        strength += 1

    # 大写字母
    if not opts.require_uppercase or re.search(r'[A-Z]', password):
        strength += 1

    # 数字
    if not opts.require_numbers or re.search(r'\d', password):
        strength += 1

    # 特殊字符
    if not opts.require_symbols or _SYMBOL_RE.search(password):
        strength += 1

    return max(0, min(PASSWORD_MAX_STRENGTH, strength))


# 文字

def has_chinese(text: str) -> bool:
    return re.search(r'[\u4e00-\u9fa5]', text) is not None


def is_chinese_only(text: str) -> bool:
    return re.fullmatch(r'[\u4e00-\u9fa5]+', text) is not None


# 数值

def is_number(value: Any) -> bool:
    """有限的 int/float（bool 除外）"""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def is_integer(value: Any) -> bool:
    if not is_number(value):
        return False
    return isinstance(value, int) or float(value).is_integer()


def is_positive_integer(value: Any) -> bool:
    return is_integer(value) and value > 0


# 日期与卡号

def is_valid_date(text: str, fmt: Optional[str] = None) -> bool:
    """日期字符串是否可解析；提供 fmt 时先按格式做形状检查"""
    if fmt:
        pattern = re.escape(fmt)
        for token, regex in _DATE_FORMAT_TOKENS:
            pattern = pattern.replace(token, regex)
        if not re.fullmatch(pattern, text):
            return False
    try:
        to_datetime(text)
    except ValueError:
        return False
    return True


def is_bank_card(card_number: str) -> bool:
    """银行卡号：13-19 位数字并通过 Luhn 校验，忽略空格与连字符"""
    digits = re.sub(r'[\s-]', '', card_number)
    if not re.fullmatch(r'\d{13,19}', digits):
        return False

    total = 0
    for index, char in enumerate(reversed(digits)):
        digit = int(char)
        if index % 2 == 1:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return total % 10 == 0


def is_hex_color(color: str) -> bool:
    return _matches(_HEX_COLOR_RE, color)
