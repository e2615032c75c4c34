"""命令行入口单元测试."""

from unittest.mock import MagicMock, patch

import pytest
from elasticsearch.exceptions import ApiError

from esretention.cli import build_parser, main
from esretention.index_manager.exceptions import IndexListingError
from esretention.retention.models import NamingConvention

FACTORY_PATCH_PATH = "esretention.cli.ESClientFactory"


@pytest.fixture
def mock_factory():
    """模拟客户端工厂，返回的客户端可配置 cat/indices 响应."""
    with patch(FACTORY_PATCH_PATH) as factory_cls:
        factory = factory_cls.return_value.__enter__.return_value
        client = MagicMock()
        factory.get_client.return_value = client
        yield factory_cls, client


class TestParser:
    """参数解析测试."""

    def test_defaults(self) -> None:
        args = build_parser().parse_args(["--url", "http://localhost:9200"])
        assert args.index_prefix == "zis-audit-"
        assert args.older_than == "25m"
        assert args.date_pattern == "month"
        assert args.no_dryrun is False
        assert args.username is None

    def test_url_required(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_invalid_date_pattern(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--url", "http://x:9200", "--date-pattern", "day"])

    def test_log_level_case_insensitive(self) -> None:
        args = build_parser().parse_args(["--url", "http://x:9200", "--log-level", "debug"])
        assert args.log_level == "DEBUG"

    def test_log_level_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ESRETENTION_LOG_LEVEL", "warning")
        args = build_parser().parse_args(["--url", "http://x:9200"])
        assert args.log_level == "WARNING"

    def test_unknown_env_log_level_falls_back(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ESRETENTION_LOG_LEVEL", "verbose")
        args = build_parser().parse_args(["--url", "http://x:9200"])
        assert args.log_level == "INFO"


class TestConfigErrors:
    """配置错误在任何 ES 请求前退出."""

    def test_malformed_threshold(self, mock_factory) -> None:
        factory_cls, _ = mock_factory
        assert main(["--url", "http://localhost:9200", "--older-than", "25"]) == 1
        factory_cls.assert_not_called()

    def test_username_without_password(self, mock_factory) -> None:
        factory_cls, _ = mock_factory
        assert main(["--url", "http://localhost:9200", "--username", "elastic"]) == 1
        factory_cls.assert_not_called()

    def test_invalid_url(self, mock_factory) -> None:
        factory_cls, _ = mock_factory
        assert main(["--url", "localhost"]) == 1
        factory_cls.assert_not_called()


class TestRun:
    """完整运行测试."""

    def test_dry_run_by_default(self, mock_factory) -> None:
        _, client = mock_factory
        client.cat.indices.return_value = [
            {"index": "zis-audit-2000-01"},
            {"index": "zis-audit-2999-01"},
        ]

        assert main(["--url", "http://localhost:9200"]) == 0

        client.cat.indices.assert_called_once_with(
            index="zis-audit-*", format="json", h="index"
        )
        client.indices.delete.assert_not_called()

    def test_live_run_deletes_old_indices(self, mock_factory) -> None:
        _, client = mock_factory
        client.cat.indices.return_value = [
            {"index": "orders-2999-1"},
            {"index": "orders-2000-5"},
            {"index": "orders-2001-1"},
        ]
        response = MagicMock()
        response.meta.status = 200
        response.get.return_value = True
        client.indices.delete.return_value = response

        code = main(
            [
                "--url",
                "http://localhost:9200",
                "--index-prefix",
                "orders-",
                "--date-pattern",
                "week",
                "--older-than",
                "21m",
                "--no-dryrun",
            ]
        )

        assert code == 0
        deleted = [c.kwargs["index"] for c in client.indices.delete.call_args_list]
        # 按月龄升序：2001 年的索引月龄小于 2000 年的索引
        assert deleted == ["orders-2001-1", "orders-2000-5"]

    def test_delete_failures_still_exit_zero(self, mock_factory) -> None:
        _, client = mock_factory
        client.cat.indices.return_value = [
            {"index": "zis-audit-2000-01"},
            {"index": "zis-audit-2000-02"},
        ]
        client.indices.delete.side_effect = [
            ApiError("error", meta=MagicMock(status=403), body={"error": "forbidden"}),
            ApiError("error", meta=MagicMock(status=500), body={"error": "internal"}),
        ]

        assert main(["--url", "http://localhost:9200", "--no-dryrun"]) == 0
        assert client.indices.delete.call_count == 2

    def test_unexpected_error_propagates(self, mock_factory) -> None:
        _, client = mock_factory
        client.cat.indices.return_value = [{"index": "zis-audit-2000-01"}]
        client.indices.delete.side_effect = RuntimeError("unexpected")

        with pytest.raises(RuntimeError):
            main(["--url", "http://localhost:9200", "--no-dryrun"])

    def test_listing_failure_exits_one(self, mock_factory) -> None:
        with patch("esretention.cli.RetentionRunner") as runner_cls:
            runner_cls.return_value.run.side_effect = IndexListingError("boom")
            assert main(["--url", "http://localhost:9200"]) == 1

    def test_config_passed_to_runner(self, mock_factory) -> None:
        with patch("esretention.cli.RetentionRunner") as runner_cls:
            main(
                [
                    "--url",
                    "http://localhost:9200",
                    "--index-prefix",
                    "logs-",
                    "--older-than",
                    "12 months",
                    "--date-pattern",
                    "week",
                ]
            )

        config = runner_cls.call_args[0][1]
        assert config.index_prefix == "logs-"
        assert config.threshold_months == 12
        assert config.date_pattern is NamingConvention.WEEK
        assert config.dry_run is True
