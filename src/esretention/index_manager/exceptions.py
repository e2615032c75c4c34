"""索引管理器异常定义模块."""

from ..exceptions import EsRetentionError


class IndexManagerError(EsRetentionError):
    """索引管理器基础异常类."""

    pass


class IndexListingError(IndexManagerError):
    """列出索引失败异常."""

    pass
