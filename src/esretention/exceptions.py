"""ES Retention 异常定义模块."""


class EsRetentionError(Exception):
    """ES Retention 基础异常类."""

    pass
