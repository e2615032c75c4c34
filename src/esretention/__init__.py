"""ES Retention - 基于索引名称日期片段的 Elasticsearch 索引保留策略工具.

按前缀列出索引，从索引名称中的日期片段（按月 "YYYY-MM" / "YYYY.MM" 或按 ISO 周
"YYYY-W"）推断索引月龄，删除月龄达到阈值的索引；默认仅试运行并输出删除计划。

主要功能:
    - parse_threshold: 解析保留阈值（如 "25m", "12 months"）
    - RetentionPlanner: 生成按月龄排序的删除计划
    - RetentionRunner: 列出、筛选并删除索引
    - ESClientFactory: 创建 Elasticsearch 客户端

使用示例:
    from esretention import NamingConvention, RetentionPlanner

    planner = RetentionPlanner(NamingConvention.MONTH, "zis-audit-", 25)
    plan = planner.plan(["zis-audit-2022-01", "zis-audit-2025-06"])
"""

__version__ = "0.1.0"

# 导出连接组件
from esretention.connection import ClusterConfig, ESClientFactory

# 导出异常
from esretention.exceptions import EsRetentionError

# 导出索引管理器
from esretention.index_manager import DeletionOutcome, IndexManager

# 导出保留策略组件
from esretention.retention import (
    CandidateIndex,
    DeletionPlan,
    NamingConvention,
    PlanEntry,
    RetentionConfig,
    RetentionPlanner,
    RetentionResult,
    RetentionRunner,
    age_in_months,
    build_matcher,
    parse_threshold,
    select_for_deletion,
)

__all__ = [
    # 版本
    "__version__",
    # 保留策略
    "RetentionPlanner",
    "RetentionRunner",
    "RetentionConfig",
    "RetentionResult",
    "NamingConvention",
    "CandidateIndex",
    "PlanEntry",
    "DeletionPlan",
    "parse_threshold",
    "build_matcher",
    "age_in_months",
    "select_for_deletion",
    # 索引管理
    "IndexManager",
    "DeletionOutcome",
    # 连接
    "ESClientFactory",
    "ClusterConfig",
    # 异常
    "EsRetentionError",
]
