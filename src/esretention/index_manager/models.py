"""索引管理器数据模型定义模块."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DeletionOutcome:
    """单个索引的删除结果.

    Attributes:
        index: 索引名称
        success: 是否删除成功
        status: HTTP 状态码，传输层错误或请求未发出时为 None
        error: 失败时的错误信息
    """

    index: str
    success: bool
    status: int | None = None
    error: str | None = None
