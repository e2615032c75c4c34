"""ES 客户端工厂模块 - 统一管理 Elasticsearch 客户端的创建和生命周期.

主要组件:
    - ESClientFactory: 客户端工厂，支持惰性创建和上下文管理
    - ClusterConfig: 集群配置模型

使用示例:
    from esretention.connection import ESClientFactory, ClusterConfig

    factory = ESClientFactory(ClusterConfig(url="http://localhost:9200"))
    client = factory.get_client()
"""

from .exceptions import ConnectionConfigError, ESClientFactoryError
from .models import ClusterConfig
from .tool import ESClientFactory

__all__ = [
    # 工厂
    "ESClientFactory",
    # 模型
    "ClusterConfig",
    # 异常
    "ESClientFactoryError",
    "ConnectionConfigError",
]
