"""ES 客户端工厂异常定义模块."""

from ..exceptions import EsRetentionError


class ESClientFactoryError(EsRetentionError):
    """客户端工厂基础异常类.

    所有客户端工厂相关异常的基类，继承自 EsRetentionError。
    """

    pass


class ConnectionConfigError(ESClientFactoryError):
    """连接配置校验异常.

    当连接配置参数不合法时抛出，例如 url 为空、只提供了用户名或密码之一等。
    """

    pass
