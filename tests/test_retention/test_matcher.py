"""索引名称匹配器单元测试."""

import pytest

from esretention.retention.matcher import IndexNameMatcher, build_matcher
from esretention.retention.models import NamingConvention


class TestMonthMatcher:
    """按月命名约定匹配测试."""

    @pytest.fixture
    def matcher(self) -> IndexNameMatcher:
        return build_matcher(NamingConvention.MONTH, "foo-")

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("foo-2025-03", (2025, 3)),
            ("foo-2025.03", (2025, 3)),
            ("foo-1999-12", (1999, 12)),
            ("foo-2025-00", (2025, 0)),
            ("foo-2025-13", (2025, 13)),
        ],
    )
    def test_matches(self, matcher: IndexNameMatcher, name: str, expected) -> None:
        """测试符合命名约定的名称（不做范围校验）."""
        assert matcher.match(name) == expected
        assert matcher.matches(name) is True

    @pytest.mark.parametrize(
        "name",
        [
            "foo-2025-3",
            "foo-25-03",
            "foo-2025_03",
            "foo-2025-03-01",
            "xfoo-2025-03",
            "foo-2025-03x",
            "bar-2025-03",
            "foo-2025-03\n",
            "",
        ],
    )
    def test_rejects(self, matcher: IndexNameMatcher, name: str) -> None:
        """测试不符合命名约定的名称返回 None."""
        assert matcher.match(name) is None
        assert matcher.matches(name) is False


class TestWeekMatcher:
    """按 ISO 周命名约定匹配测试."""

    @pytest.fixture
    def matcher(self) -> IndexNameMatcher:
        return build_matcher(NamingConvention.WEEK, "foo-")

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("foo-2025-1", (2025, 1)),
            ("foo-2025-12", (2025, 12)),
            ("foo-2025-01", (2025, 1)),
            ("foo-2025-99", (2025, 99)),
        ],
    )
    def test_matches(self, matcher: IndexNameMatcher, name: str, expected) -> None:
        """测试符合命名约定的名称."""
        assert matcher.match(name) == expected

    @pytest.mark.parametrize(
        "name",
        ["foo-2025-123", "foo-2025.12", "foo-2025-", "foo-2025-1a", "foo-202-1"],
    )
    def test_rejects(self, matcher: IndexNameMatcher, name: str) -> None:
        """测试不符合命名约定的名称."""
        assert matcher.match(name) is None


class TestPrefixEscaping:
    """前缀按字面匹配测试."""

    def test_dot_in_prefix_is_literal(self) -> None:
        """测试前缀中的 "." 不会匹配任意字符."""
        matcher = build_matcher(NamingConvention.MONTH, "logs.app-")
        assert matcher.match("logs.app-2025-03") == (2025, 3)
        assert matcher.match("logsXapp-2025-03") is None

    @pytest.mark.parametrize("prefix", ["a+b-", "(x)-", "[x]-", "a*-", "a?-", "a|b-"])
    def test_special_characters_in_prefix(self, prefix: str) -> None:
        """测试正则特殊字符被转义."""
        matcher = build_matcher(NamingConvention.WEEK, prefix)
        assert matcher.match(f"{prefix}2025-7") == (2025, 7)

    def test_empty_prefix(self) -> None:
        """测试空前缀."""
        matcher = build_matcher(NamingConvention.MONTH, "")
        assert matcher.match("2025-03") == (2025, 3)

    def test_accepts_convention_value(self) -> None:
        """测试可以用字符串值指定命名约定."""
        matcher = IndexNameMatcher("week", "foo-")  # type: ignore[arg-type]
        assert matcher.convention is NamingConvention.WEEK
        assert "week" in repr(matcher)
