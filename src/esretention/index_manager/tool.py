"""索引管理器核心工具类.

保留策略与 Elasticsearch 之间的窄接口：按前缀列出索引名称、按名称删除单个索引。
"""

import logging
from collections.abc import Iterable

from elasticsearch import Elasticsearch
from elasticsearch.exceptions import ApiError, NotFoundError, TransportError

from .exceptions import IndexListingError
from .models import DeletionOutcome

_MULTI_TARGET_CHARS = frozenset({"*", "?", ","})


def _is_single_index_name(index_name: str) -> bool:
    """判断名称是否只指向单个索引.

    包含通配符或逗号的名称会被 Elasticsearch 展开为多个索引，删除时拒绝。
    其余校验（包括以 . 开头的隐藏索引）交给 Elasticsearch 处理。
    """
    if not index_name:
        return False
    return not any(char in _MULTI_TARGET_CHARS for char in index_name)


class IndexManager:
    """索引管理器.

    Args:
        es_client: Elasticsearch 客户端实例
        logger: 日志记录器，默认使用模块 logger

    Examples:
        >>> manager = IndexManager(es_client)
        >>> names = manager.list_index_names("zis-audit-")
        >>> outcome = manager.delete_index("zis-audit-2023-01")
    """

    def __init__(
        self,
        es_client: Elasticsearch,
        logger: logging.Logger | None = None,
    ):
        if es_client is None:
            raise ValueError("es_client 不能为 None")
        self.es_client = es_client
        self._logger = logger or logging.getLogger(__name__)

    def list_index_names(self, prefix: str) -> list[str]:
        """列出名称以指定前缀开头的所有索引.

        通过 _cat/indices/<prefix>* 接口获取，仅请求 index 列。

        Args:
            prefix: 索引名称前缀

        Returns:
            索引名称列表（保持 ES 返回顺序）

        Raises:
            IndexListingError: 请求失败时抛出
        """
        pattern = f"{prefix}*"
        try:
            response = self.es_client.cat.indices(index=pattern, format="json", h="index")
        except NotFoundError:
            self._logger.info(f"未找到匹配 '{pattern}' 的索引")
            return []
        except (ApiError, TransportError) as e:
            raise IndexListingError(f"列出索引 '{pattern}' 失败: {e}") from e

        names = [item.get("index", "") for item in response]
        return [name for name in names if name]

    def delete_index(self, index_name: str) -> DeletionOutcome:
        """删除单个索引.

        请求失败不会抛出异常，而是记录在返回的 DeletionOutcome 中，
        以便调用方继续处理剩余索引。

        Args:
            index_name: 索引名称（不允许通配符或逗号）

        Returns:
            DeletionOutcome 删除结果
        """
        if not _is_single_index_name(index_name):
            self._logger.error(f"DELETE {index_name} 已拒绝: 名称为空或包含通配符")
            return DeletionOutcome(index_name, False, error="名称为空或包含通配符")

        try:
            response = self.es_client.indices.delete(index=index_name)
        except ApiError as e:
            status = e.meta.status
            self._logger.error(f"DELETE {index_name} 失败: {status} | {e.body}")
            return DeletionOutcome(index_name, False, status=status, error=str(e))
        except TransportError as e:
            self._logger.error(f"DELETE {index_name} 失败: {e}")
            return DeletionOutcome(index_name, False, error=str(e))

        status = response.meta.status
        if not response.get("acknowledged", False):
            self._logger.error(f"DELETE {index_name} 未被确认: {status}")
            return DeletionOutcome(index_name, False, status=status, error="acknowledged=false")

        self._logger.info(f"DELETE {index_name} -> {status}")
        return DeletionOutcome(index_name, True, status=status)

    def bulk_delete_indices(self, index_names: Iterable[str]) -> list[DeletionOutcome]:
        """按顺序逐个删除索引.

        单个索引删除失败不会中断后续删除，也不会重试。

        Args:
            index_names: 索引名称列表

        Returns:
            与输入顺序一致的删除结果列表
        """
        return [self.delete_index(index_name) for index_name in index_names]
