"""ES 客户端工厂数据模型定义模块."""

from dataclasses import dataclass
from urllib.parse import urlsplit

from .exceptions import ConnectionConfigError


@dataclass
class ClusterConfig:
    """集群配置模型.

    定义 ES 集群的连接信息，包括地址、认证方式和请求超时。

    Attributes:
        url: ES 集群地址（必需，需包含协议和主机，如 "http://localhost:9200"）
        username: Basic Auth 用户名
        password: Basic Auth 密码
        request_timeout: 请求超时时间（秒），默认 30，必须 > 0
        verify_certs: 是否验证 SSL 证书，默认 True
        ca_certs: CA 证书文件路径

    Raises:
        ConnectionConfigError: 当参数不合法时抛出

    Examples:
        >>> config = ClusterConfig(
        ...     url="http://localhost:9200",
        ...     username="elastic",
        ...     password="changeme",
        ... )
    """

    url: str
    username: str | None = None
    password: str | None = None
    request_timeout: int = 30
    verify_certs: bool = True
    ca_certs: str | None = None

    def __post_init__(self) -> None:
        """校验集群配置参数合法性."""
        if not self.url:
            raise ConnectionConfigError("url 不能为空，请提供 ES 集群地址")
        parts = urlsplit(self.url)
        if parts.scheme not in ("http", "https") or not parts.hostname:
            raise ConnectionConfigError(
                f"url 格式不合法: {self.url!r}，应为 'http(s)://host:port' 形式"
            )
        if (self.username is None) != (self.password is None):
            raise ConnectionConfigError(
                "username 和 password 必须同时提供才能使用 Basic Auth"
            )
        if self.request_timeout <= 0:
            raise ConnectionConfigError(
                f"request_timeout 必须 > 0，当前值: {self.request_timeout}"
            )

    @property
    def has_basic_auth(self) -> bool:
        """是否配置了 Basic Auth."""
        return self.username is not None and self.password is not None

    @property
    def use_tls(self) -> bool:
        """是否使用 https 连接."""
        return urlsplit(self.url).scheme == "https"
