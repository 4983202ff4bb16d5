"""
工具模块初始化
导出函数组合子与各类工具函数
"""

from .debounce import (
    # 防抖与节流
    debounce, throttle, Debounced, DebounceState, LoopScheduler,
)

from .functional import (
    # 组合子
    memoize, Memoized, default_cache_key, once, curry, compose, pipe,

    # 异步
    delay, retry,
)

from .array import (
    unique, unique_by, chunk, flatten, flatten_deep,
    intersection, difference, union, shuffle, sample,
    group_by, sum_, sum_by,
)

from .object import (
    deep_clone, is_empty, get, set_, pick, omit, deep_merge, merge,
)

from .string import (
    capitalize, camel_case, kebab_case, snake_case, pascal_case,
    truncate, trim, pad, random_string, template,
    escape_html, unescape_html, byte_length,
)

from .number import (
    random_int, random_float, format_number, format_thousands, to_percent,
    format_file_size, clamp, is_even, is_odd,
    average, variance, standard_deviation, median,
    distance, to_radians, to_degrees, gcd, lcm,
)

from .dates import (
    to_datetime, format_date, days_between, is_today, is_yesterday,
    start_of_day, end_of_day, add_days, add_months, get_relative_time,
)

from .validate import (
    is_email, is_phone, is_id_card, is_url, is_ip, get_password_strength,
    has_chinese, is_chinese_only, is_number, is_integer, is_positive_integer,
    is_valid_date, is_bank_card, is_hex_color, is_qq, is_wechat, is_plate_number,
)

__all__ = [
    # 防抖与节流
    'debounce', 'throttle', 'Debounced', 'DebounceState', 'LoopScheduler',

    # 组合子
    'memoize', 'Memoized', 'default_cache_key', 'once', 'curry', 'compose', 'pipe',
    'delay', 'retry',

    # 序列
    'unique', 'unique_by', 'chunk', 'flatten', 'flatten_deep',
    'intersection', 'difference', 'union', 'shuffle', 'sample',
    'group_by', 'sum_', 'sum_by',

    # 字典
    'deep_clone', 'is_empty', 'get', 'set_', 'pick', 'omit', 'deep_merge', 'merge',

    # 字符串
    'capitalize', 'camel_case', 'kebab_case', 'snake_case', 'pascal_case',
    'truncate', 'trim', 'pad', 'random_string', 'template',
    'escape_html', 'unescape_html', 'byte_length',

    # 数值
    'random_int', 'random_float', 'format_number', 'format_thousands', 'to_percent',
    'format_file_size', 'clamp', 'is_even', 'is_odd',
    'average', 'variance', 'standard_deviation', 'median',
    'distance', 'to_radians', 'to_degrees', 'gcd', 'lcm',

    # 日期
    'to_datetime', 'format_date', 'days_between', 'is_today', 'is_yesterday',
    'start_of_day', 'end_of_day', 'add_days', 'add_months', 'get_relative_time',

    # 校验
    'is_email', 'is_phone', 'is_id_card', 'is_url', 'is_ip', 'get_password_strength',
    'has_chinese', 'is_chinese_only', 'is_number', 'is_integer', 'is_positive_integer',
    'is_valid_date', 'is_bank_card', 'is_hex_color', 'is_qq', 'is_wechat', 'is_plate_number',
]
