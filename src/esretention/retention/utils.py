"""保留策略工具函数模块.

提供保留阈值（月数）格式的校验与解析功能。
"""

import re

from .exceptions import MalformedThresholdError, NegativeThresholdError


# 阈值格式正则：数字 + 可选空白 + m / month / months，不区分大小写，允许首尾空白
_THRESHOLD_PATTERN = re.compile(r"\s*([0-9]+)\s*m(?:onths?)?\s*", re.IGNORECASE)

# 阈值上限（32 位有符号整数）
_MAX_THRESHOLD_MONTHS = 2**31 - 1


def validate_threshold_format(value: str) -> bool:
    """校验值是否符合保留阈值格式.

    Args:
        value: 待校验的阈值字符串，如 "25m", "12 months", "3 Month"

    Returns:
        True 表示格式合法，False 表示格式不合法

    Examples:
        >>> validate_threshold_format("25m")
        True
        >>> validate_threshold_format(" 12 months ")
        True
        >>> validate_threshold_format("25")
        False
        >>> validate_threshold_format("-1m")
        False
    """
    if not isinstance(value, str) or not value:
        return False
    return _THRESHOLD_PATTERN.fullmatch(value) is not None


def parse_threshold(value: str) -> int:
    """将保留阈值字符串转换为月数.

    Args:
        value: 阈值字符串，如 "25m", " 12 months ", "0m"

    Returns:
        非负整数月数

    Raises:
        MalformedThresholdError: 当格式不合法时抛出
        NegativeThresholdError: 当数值无法表示为非负 32 位整数时抛出

    Examples:
        >>> parse_threshold("25m")
        25
        >>> parse_threshold(" 12 months ")
        12
        >>> parse_threshold("0m")
        0
    """
    if not validate_threshold_format(value):
        raise MalformedThresholdError(
            f"不合法的保留阈值: {value!r}，应为月数格式（如 '25m', '12 months'）"
        )

    match = _THRESHOLD_PATTERN.fullmatch(value)
    # validate_threshold_format 已确保 match 不为 None
    assert match is not None
    months = int(match.group(1))

    if months > _MAX_THRESHOLD_MONTHS:
        raise NegativeThresholdError(
            f"保留阈值超出范围: {value!r}，必须为不超过 {_MAX_THRESHOLD_MONTHS} 的非负整数"
        )

    return months
