"""索引管理器模块.

该模块提供保留策略所需的索引操作：
- 按前缀列出索引名称
- 按名称删除单个索引（失败时记录结果而不中断）

示例用法:
    >>> from esretention.index_manager import IndexManager
    >>> manager = IndexManager(es_client)
    >>> names = manager.list_index_names("logs-")
    >>> outcomes = manager.bulk_delete_indices(["logs-2023-01", "logs-2023-02"])
"""

from .exceptions import IndexListingError, IndexManagerError
from .models import DeletionOutcome
from .tool import IndexManager

__all__ = [
    # 核心类
    "IndexManager",
    # 数据模型
    "DeletionOutcome",
    # 异常类
    "IndexManagerError",
    "IndexListingError",
]
