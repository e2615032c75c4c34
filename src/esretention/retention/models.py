"""保留策略数据模型定义模块.

提供保留策略相关的数据模型，包括：
- NamingConvention: 索引命名约定枚举（按月 / 按 ISO 周）
- CandidateIndex: 已识别出日期片段的候选索引
- PlanEntry / DeletionPlan: 有序删除计划
- RetentionConfig: 单次运行的保留策略配置
- RetentionResult: 单次运行的执行结果
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum

from esretention.index_manager.models import DeletionOutcome

from .utils import parse_threshold


class NamingConvention(str, Enum):
    """索引命名约定.

    Attributes:
        MONTH: 按月分区，如 "logs-2025-03" 或 "logs-2025.03"
        WEEK: 按 ISO 周分区，如 "logs-2025-7" 或 "logs-2025-12"
    """

    MONTH = "month"
    WEEK = "week"


@dataclass(frozen=True)
class CandidateIndex:
    """候选索引.

    Attributes:
        name: 索引名称
        year: 从名称中解析出的年份
        part: 月份（1-12）或 ISO 周数（1-53）
        age_months: 相对当前月份的月龄，未来日期为负数
    """

    name: str
    year: int
    part: int
    age_months: int


@dataclass(frozen=True)
class PlanEntry:
    """删除计划条目."""

    index: str
    age_months: int


@dataclass(frozen=True)
class DeletionPlan:
    """有序删除计划.

    条目按 age_months 升序排列，月龄相同的条目保持输入顺序。

    Examples:
        >>> plan = DeletionPlan((PlanEntry("logs-2023-01", 26),))
        >>> plan.index_names
        ['logs-2023-01']
    """

    entries: tuple[PlanEntry, ...] = ()

    def __iter__(self) -> Iterator[PlanEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __bool__(self) -> bool:
        return bool(self.entries)

    @property
    def index_names(self) -> list[str]:
        """返回计划中的索引名称列表（保持计划顺序）."""
        return [entry.index for entry in self.entries]


@dataclass
class RetentionConfig:
    """保留策略运行配置.

    threshold_months 在初始化时由 older_than 解析得到，
    因此格式错误的阈值会在任何 ES 请求之前被拒绝。

    Attributes:
        index_prefix: 索引名称前缀（按字面匹配）
        older_than: 保留阈值字符串，如 "25m", "12 months"
        date_pattern: 索引命名约定
        dry_run: 试运行模式，为 True 时仅输出删除计划（默认 True）
        threshold_months: 解析后的阈值月数（只读）

    Raises:
        MalformedThresholdError: older_than 格式不合法
        NegativeThresholdError: older_than 数值超出范围

    Examples:
        >>> config = RetentionConfig(index_prefix="logs-", older_than="12m")
        >>> config.threshold_months
        12
    """

    index_prefix: str = "zis-audit-"
    older_than: str = "25m"
    date_pattern: NamingConvention = NamingConvention.MONTH
    dry_run: bool = True
    threshold_months: int = field(init=False)

    def __post_init__(self) -> None:
        """解析并校验阈值."""
        self.date_pattern = NamingConvention(self.date_pattern)
        self.threshold_months = parse_threshold(self.older_than)


@dataclass
class RetentionResult:
    """单次保留策略运行结果.

    Attributes:
        dry_run: 是否为试运行
        threshold_months: 使用的阈值月数
        fetched_count: 从 ES 获取的索引名称数量
        plan: 删除计划
        outcomes: 逐个索引的删除结果（试运行时为空）
    """

    dry_run: bool
    threshold_months: int
    fetched_count: int = 0
    plan: DeletionPlan = field(default_factory=DeletionPlan)
    outcomes: list[DeletionOutcome] = field(default_factory=list)

    @property
    def deleted_indices(self) -> list[str]:
        return [o.index for o in self.outcomes if o.success]

    @property
    def failed_indices(self) -> list[str]:
        return [o.index for o in self.outcomes if not o.success]
