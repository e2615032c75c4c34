"""保留策略核心实现模块.

包含月龄计算、删除候选筛选以及将二者组合起来的 RetentionPlanner。
本模块所有函数均为纯函数，不发起任何 ES 请求。
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from datetime import UTC, date, datetime

from .exceptions import (
    DateRangeError,
    InvalidIsoWeekError,
    MonthOutOfRangeError,
    WeekOutOfRangeError,
)
from .matcher import IndexNameMatcher, build_matcher
from .models import CandidateIndex, DeletionPlan, NamingConvention, PlanEntry


def first_of_month(value: date | datetime) -> date:
    """将日期截断到当月 1 日."""
    return date(value.year, value.month, 1)


def months_between(now: date, then: tuple[int, int]) -> int:
    """计算参考日期与 (年份, 月份) 之间相差的自然月数（可为负数）.

    Examples:
        >>> months_between(date(2025, 3, 1), (2025, 1))
        2
    """
    then_year, then_month = then
    return (now.year - then_year) * 12 + (now.month - then_month)


def _anchor_month(convention: NamingConvention, year: int, part: int) -> tuple[int, int]:
    """将 (年份, 月份/周数) 转换为所在的 (年份, 月份).

    按月约定不构造日期，0000 等 datetime 无法表示的年份同样可以计算。
    """
    if convention is NamingConvention.MONTH:
        if not 1 <= part <= 12:
            raise MonthOutOfRangeError(f"月份超出范围: {part}（应为 1-12）")
        return year, part
    elif convention is NamingConvention.WEEK:
        if not 1 <= part <= 53:
            raise WeekOutOfRangeError(f"周数超出范围: {part}（应为 1-53）")
        try:
            monday = date.fromisocalendar(year, part, 1)
        except ValueError as e:
            raise InvalidIsoWeekError(f"无效的 ISO 周: {year}-W{part:02d}") from e
        return monday.year, monday.month
    raise ValueError(f"不支持的命名约定: {convention!r}")


def age_in_months(
    convention: NamingConvention,
    year: int,
    part: int,
    reference_date: date | datetime,
) -> int:
    """计算索引日期相对参考日期的月龄.

    参考日期先截断到当月 1 日。按月约定直接取 (year, part) 的 1 日；
    按周约定先取 ISO 周的周一，再截断到该周一所在月份的 1 日，
    因此同一自然月内的不同周月龄相同。

    Args:
        convention: 索引命名约定
        year: 年份
        part: 月份（1-12）或 ISO 周数（1-53）
        reference_date: 参考日期（通常为当前日期）

    Returns:
        月龄，索引日期晚于参考月份时为负数

    Raises:
        MonthOutOfRangeError: 月份不在 1-12 范围内
        WeekOutOfRangeError: 周数不在 1-53 范围内
        InvalidIsoWeekError: 该年份不存在对应的 ISO 周（包括 datetime 无法表示的年份）

    Examples:
        >>> age_in_months(NamingConvention.MONTH, 2025, 1, date(2025, 3, 17))
        2
        >>> age_in_months(NamingConvention.WEEK, 2025, 1, date(2025, 3, 1))
        3
    """
    then = _anchor_month(NamingConvention(convention), year, part)
    return months_between(first_of_month(reference_date), then)


def select_for_deletion(
    candidates: Iterable[CandidateIndex],
    threshold_months: int,
) -> DeletionPlan:
    """筛选月龄达到阈值的候选索引并生成删除计划.

    月龄 >= threshold_months 的候选会进入计划，计划按月龄升序排列，
    月龄相同的条目保持输入顺序。

    Args:
        candidates: 候选索引
        threshold_months: 阈值月数

    Returns:
        DeletionPlan 实例
    """
    selected = [c for c in candidates if c.age_months >= threshold_months]
    selected.sort(key=lambda c: c.age_months)
    return DeletionPlan(tuple(PlanEntry(c.name, c.age_months) for c in selected))


def sort_index_names(names: Iterable[str], prefix: str) -> list[str]:
    """按前缀之后的日期片段对索引名称排序.

    排序键将 "." 统一替换为 "-"，使 "2025.03" 与 "2025-03" 可以按字典序比较；
    不以前缀开头的名称使用整个（替换后的）名称作为排序键。

    Examples:
        >>> sort_index_names(["logs-2025.03", "logs-2024-11"], "logs-")
        ['logs-2024-11', 'logs-2025.03']
    """

    def _key(name: str) -> str:
        if name.startswith(prefix):
            name = name[len(prefix) :]
        return name.replace(".", "-")

    return sorted(names, key=_key)


class RetentionPlanner:
    """保留策略规划器.

    将索引名称列表依次经过排序、日期片段匹配、月龄计算和阈值筛选，生成删除计划。
    规划器本身不保存可变状态，同一输入多次调用得到相同结果。

    Args:
        convention: 索引命名约定
        prefix: 索引名称前缀
        threshold_months: 阈值月数（>= 0）
        now_func: 获取当前时间的函数，主要用于测试，默认使用 UTC 当前时间
        logger: 日志记录器，默认使用模块 logger

    Examples:
        >>> planner = RetentionPlanner(NamingConvention.MONTH, "logs-", 12)
        >>> plan = planner.plan(["logs-2023-01", "logs-2025-02", "other"])
    """

    def __init__(
        self,
        convention: NamingConvention,
        prefix: str,
        threshold_months: int,
        now_func: Callable[[], datetime] | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        if threshold_months < 0:
            raise ValueError(f"threshold_months 不能为负数，当前值: {threshold_months}")
        self.convention = NamingConvention(convention)
        self.prefix = prefix
        self.threshold_months = threshold_months
        self.matcher: IndexNameMatcher = build_matcher(self.convention, prefix)
        self._now_func = now_func
        self._logger = logger or logging.getLogger(__name__)

    def reference_date(self) -> date:
        """返回截断到当月 1 日的参考日期."""
        now = self._now_func() if self._now_func else datetime.now(tz=UTC)
        return first_of_month(now)

    def evaluate(self, names: Iterable[str]) -> list[CandidateIndex]:
        """识别索引名称并计算月龄.

        不符合命名约定的名称以 DEBUG 级别记录后跳过；
        日期片段超出范围的名称以 WARNING 级别记录后跳过。

        Args:
            names: 索引名称列表

        Returns:
            按日期片段排序的候选索引列表
        """
        now_first = self.reference_date()
        candidates: list[CandidateIndex] = []

        for name in sort_index_names(names, self.prefix):
            parts = self.matcher.match(name)
            if parts is None:
                self._logger.debug(f"索引名称不符合命名约定，跳过: {name}")
                continue

            year, part = parts
            try:
                age = age_in_months(self.convention, year, part, now_first)
            except DateRangeError as e:
                self._logger.warning(f"跳过 {name}: {e}")
                continue

            self._logger.debug(f"索引 {name} -> 月龄 {age}")
            candidates.append(CandidateIndex(name, year, part, age))

        return candidates

    def plan(self, names: Iterable[str]) -> DeletionPlan:
        """生成删除计划.

        Args:
            names: 索引名称列表

        Returns:
            按月龄升序排列的 DeletionPlan
        """
        return select_for_deletion(self.evaluate(names), self.threshold_months)
