"""索引名称日期片段匹配模块.

根据命名约定和索引前缀构建正则，从索引名称中提取 (年份, 月份/周数)。
匹配是纯结构性的，不校验数值是否构成合法日期。
"""

import re

from .models import NamingConvention


class IndexNameMatcher:
    """索引名称匹配器.

    Args:
        convention: 索引命名约定
        prefix: 索引名称前缀，按字面匹配（正则特殊字符会被转义）

    Examples:
        >>> matcher = IndexNameMatcher(NamingConvention.MONTH, "logs-")
        >>> matcher.match("logs-2025.03")
        (2025, 3)
        >>> matcher.match("logs-2025-3") is None
        True
    """

    def __init__(self, convention: NamingConvention, prefix: str) -> None:
        self.convention = NamingConvention(convention)
        self.prefix = prefix
        self.pattern = re.compile(self._build_pattern(self.convention, prefix))

    @staticmethod
    def _build_pattern(convention: NamingConvention, prefix: str) -> str:
        escaped = re.escape(prefix)
        if convention is NamingConvention.MONTH:
            # <prefix>YYYY-MM 或 <prefix>YYYY.MM
            return rf"{escaped}([0-9]{{4}})[.\-]([0-9]{{2}})"
        elif convention is NamingConvention.WEEK:
            # <prefix>YYYY-W 或 <prefix>YYYY-WW
            return rf"{escaped}([0-9]{{4}})-([0-9]{{1,2}})"
        raise ValueError(f"不支持的命名约定: {convention!r}")

    def match(self, name: str) -> tuple[int, int] | None:
        """从索引名称中提取 (年份, 月份/周数).

        Args:
            name: 索引名称

        Returns:
            (year, part) 元组；名称整体不符合命名约定时返回 None
        """
        m = self.pattern.fullmatch(name)
        if m is None:
            return None
        return int(m.group(1)), int(m.group(2))

    def matches(self, name: str) -> bool:
        """判断索引名称是否符合命名约定."""
        return self.pattern.fullmatch(name) is not None

    def __repr__(self) -> str:
        return (
            f"IndexNameMatcher(convention={self.convention.value}, "
            f"prefix={self.prefix!r})"
        )


def build_matcher(convention: NamingConvention, prefix: str) -> IndexNameMatcher:
    """构建索引名称匹配器.

    Args:
        convention: 索引命名约定
        prefix: 索引名称前缀

    Returns:
        IndexNameMatcher 实例
    """
    return IndexNameMatcher(convention, prefix)
