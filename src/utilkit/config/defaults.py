"""默认参数常量"""

# 防抖 / 节流
DEBOUNCE_DEFAULT_LEADING = False
DEBOUNCE_DEFAULT_TRAILING = True
THROTTLE_DEFAULT_LEADING = True
THROTTLE_DEFAULT_TRAILING = True

# 重试
RETRY_DEFAULT_TIMES = 3
RETRY_DEFAULT_DELAY_MS = 1000

# 日期
DATE_DEFAULT_FORMAT = "YYYY-MM-DD HH:mm:ss"
DATE_SHORT_FORMAT = "YYYY-MM-DD"

# 数值
NUMBER_DEFAULT_PRECISION = 2
THOUSANDS_DEFAULT_SEPARATOR = ","
FILE_SIZE_UNITS = ("Bytes", "KB", "MB", "GB", "TB", "PB")

# 字符串
TRUNCATE_DEFAULT_SUFFIX = "..."
RANDOM_STRING_CHARSET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"

# 密码强度
PASSWORD_DEFAULT_MIN_LENGTH = 8
PASSWORD_MAX_STRENGTH = 4
