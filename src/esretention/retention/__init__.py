"""保留策略模块.

根据索引名称中的日期片段推断索引月龄，筛选并删除超过保留阈值的索引。

主要组件:
- parse_threshold: 保留阈值解析（如 "25m" -> 25）
- IndexNameMatcher / build_matcher: 按命名约定提取 (年份, 月份/周数)
- age_in_months / select_for_deletion: 月龄计算与删除候选筛选
- RetentionPlanner: 组合以上步骤生成删除计划
- RetentionRunner: 结合 IndexManager 执行一次完整的保留策略

示例用法:
    >>> from esretention.retention import NamingConvention, RetentionPlanner
    >>> planner = RetentionPlanner(NamingConvention.WEEK, "orders-", 21)
    >>> plan = planner.plan(["orders-2023-1", "orders-2025-40"])
    >>> for entry in plan:
    ...     print(entry.index, entry.age_months)
"""

from .exceptions import (
    DateRangeError,
    InvalidIsoWeekError,
    MalformedThresholdError,
    MonthOutOfRangeError,
    NegativeThresholdError,
    RetentionError,
    ThresholdParseError,
    WeekOutOfRangeError,
)
from .matcher import IndexNameMatcher, build_matcher
from .models import (
    CandidateIndex,
    DeletionPlan,
    NamingConvention,
    PlanEntry,
    RetentionConfig,
    RetentionResult,
)
from .runner import RetentionRunner
from .tool import (
    RetentionPlanner,
    age_in_months,
    first_of_month,
    months_between,
    select_for_deletion,
    sort_index_names,
)
from .utils import parse_threshold, validate_threshold_format

__all__ = [
    # 核心类
    "RetentionPlanner",
    "RetentionRunner",
    "IndexNameMatcher",
    # 数据模型
    "NamingConvention",
    "CandidateIndex",
    "PlanEntry",
    "DeletionPlan",
    "RetentionConfig",
    "RetentionResult",
    # 函数
    "parse_threshold",
    "validate_threshold_format",
    "build_matcher",
    "age_in_months",
    "first_of_month",
    "months_between",
    "select_for_deletion",
    "sort_index_names",
    # 异常
    "RetentionError",
    "ThresholdParseError",
    "MalformedThresholdError",
    "NegativeThresholdError",
    "DateRangeError",
    "MonthOutOfRangeError",
    "WeekOutOfRangeError",
    "InvalidIsoWeekError",
]
