"""ES 客户端工厂工具模块.

提供 ESClientFactory 类，用于根据集群配置创建 Elasticsearch 客户端并管理其生命周期。

使用示例:
    from esretention.connection import ESClientFactory, ClusterConfig

    with ESClientFactory(ClusterConfig(url="http://localhost:9200")) as factory:
        client = factory.get_client()
"""

from __future__ import annotations

import logging

from elasticsearch import Elasticsearch

from .models import ClusterConfig

logger = logging.getLogger(__name__)


class ESClientFactory:
    """Elasticsearch 客户端工厂.

    惰性创建并缓存客户端，支持上下文管理器自动关闭连接。

    Attributes:
        _cluster: 集群配置
        _client: 已缓存的客户端

    Examples:
        >>> factory = ESClientFactory(ClusterConfig(url="http://localhost:9200"))
        >>> client = factory.get_client()
        >>> factory.close()
    """

    def __init__(self, cluster: ClusterConfig) -> None:
        self._cluster = cluster
        self._client: Elasticsearch | None = None

    def _create_client(self) -> Elasticsearch:
        """根据集群配置创建 Elasticsearch 客户端实例.

        Returns:
            Elasticsearch 客户端实例
        """
        kwargs: dict = {
            "hosts": [self._cluster.url],
            "request_timeout": self._cluster.request_timeout,
        }

        # Basic Auth 认证
        if self._cluster.has_basic_auth:
            kwargs["basic_auth"] = (self._cluster.username, self._cluster.password)

        # SSL/TLS 配置仅对 https 生效
        if self._cluster.use_tls:
            kwargs["verify_certs"] = self._cluster.verify_certs
            if self._cluster.ca_certs:
                kwargs["ca_certs"] = self._cluster.ca_certs

        logger.debug(f"创建 ES 客户端: {self._cluster.url}")
        return Elasticsearch(**kwargs)

    def get_client(self) -> Elasticsearch:
        """获取客户端，首次调用时创建.

        Returns:
            Elasticsearch 客户端实例
        """
        if self._client is None:
            self._client = self._create_client()
        return self._client

    # ============================================================
    # 生命周期管理
    # ============================================================

    def __enter__(self) -> ESClientFactory:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """上下文管理器退出，自动关闭客户端."""
        self.close()

    def close(self) -> None:
        """关闭已创建的客户端连接并清空缓存."""
        if self._client is None:
            return
        try:
            self._client.close()
        except Exception as e:
            logger.warning(f"关闭 ES 客户端失败: {e}")
        self._client = None
