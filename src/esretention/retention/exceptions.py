"""保留策略异常定义模块."""

from esretention.exceptions import EsRetentionError


class RetentionError(EsRetentionError):
    """保留策略基础异常类."""

    pass


class ThresholdParseError(RetentionError):
    """保留阈值解析异常.

    所有阈值字符串（如 "25m"）解析相关异常的基类。
    """

    pass


class MalformedThresholdError(ThresholdParseError):
    """阈值格式不合法异常.

    当阈值字符串不符合 "<数字>m" / "<数字> months" 格式时抛出。
    """

    pass


class NegativeThresholdError(ThresholdParseError):
    """阈值无法表示为非负整数异常.

    语法本身不允许负号，因此仅在数值超出 32 位有符号整数范围时触发。
    """

    pass


class DateRangeError(RetentionError):
    """索引名中的日期片段超出合法范围."""

    pass


class MonthOutOfRangeError(DateRangeError):
    """月份不在 1-12 范围内."""

    pass


class WeekOutOfRangeError(DateRangeError):
    """ISO 周数不在 1-53 范围内."""

    pass


class InvalidIsoWeekError(DateRangeError):
    """ISO 周在该年份中不存在（如只有 52 周的年份中的第 53 周）."""

    pass
