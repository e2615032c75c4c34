"""保留策略执行模块.

提供 RetentionRunner，用于对单个索引前缀执行一次完整的保留策略：
列出索引 → 生成删除计划 → 试运行时仅输出计划，否则按计划顺序删除。
"""

import logging
from collections.abc import Callable
from datetime import datetime

from esretention.index_manager import IndexManager

from .models import RetentionConfig, RetentionResult
from .tool import RetentionPlanner


class RetentionRunner:
    """保留策略执行器.

    基于 IndexManager 的列出和删除接口进行组合编排，不直接操作 Elasticsearch 客户端。

    Args:
        index_manager: IndexManager 实例
        config: 保留策略配置
        now_func: 获取当前时间的函数，主要用于测试
        logger: 日志记录器，默认使用模块 logger

    Examples:
        >>> runner = RetentionRunner(
        ...     IndexManager(es_client),
        ...     RetentionConfig(index_prefix="logs-", older_than="12m"),
        ... )
        >>> result = runner.run()
        >>> print(result.plan.index_names)
    """

    def __init__(
        self,
        index_manager: IndexManager,
        config: RetentionConfig,
        now_func: Callable[[], datetime] | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._index_manager = index_manager
        self._config = config
        self._logger = logger or logging.getLogger(__name__)
        self._planner = RetentionPlanner(
            convention=config.date_pattern,
            prefix=config.index_prefix,
            threshold_months=config.threshold_months,
            now_func=now_func,
            logger=self._logger,
        )

    @property
    def planner(self) -> RetentionPlanner:
        return self._planner

    def run(self) -> RetentionResult:
        """执行一次保留策略.

        1. list_index_names: 获取匹配前缀的所有索引名称
        2. 生成按月龄升序排列的删除计划
        3. dry_run 模式仅输出删除计划，否则按计划顺序逐个删除

        单个索引删除失败只记录日志，不中断后续删除。

        Returns:
            RetentionResult 执行结果

        Raises:
            IndexListingError: 列出索引失败时抛出
        """
        config = self._config
        self._logger.info(
            f"阈值: 月龄大于或等于 {config.threshold_months} 个月的索引将被删除"
        )

        names = self._index_manager.list_index_names(config.index_prefix)
        self._logger.info(f"共获取 {len(names)} 个索引名称")

        plan = self._planner.plan(names)
        result = RetentionResult(
            dry_run=config.dry_run,
            threshold_months=config.threshold_months,
            fetched_count=len(names),
            plan=plan,
        )

        if not plan:
            self._logger.info("没有需要删除的索引（0 个索引达到阈值）")
            return result

        if config.dry_run:
            self._logger.info(f"试运行: 将删除 {len(plan)} 个索引（按月龄升序）:")
            for entry in plan:
                self._logger.info(f"{entry.index}  (age={entry.age_months}m)")
            return result

        self._logger.info(f"正式运行: 开始删除 {len(plan)} 个索引（按月龄升序）")
        result.outcomes = self._index_manager.bulk_delete_indices(plan.index_names)

        failed = result.failed_indices
        self._logger.info(
            f"删除完成: 成功 {len(result.deleted_indices)} 个，失败 {len(failed)} 个"
        )
        if failed:
            self._logger.warning(f"删除失败的索引: {failed}")
        return result
