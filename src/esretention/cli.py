"""es-retention 命令行入口.

按索引名称中的日期片段（按月或按 ISO 周）删除过期索引，默认仅试运行。

使用示例:
    es-retention --url http://localhost:9200 --index-prefix zis-audit- --older-than 25m
    es-retention --url http://localhost:9200 --index-prefix kafka-zis-external-orders-notify- \\
        --date-pattern week --older-than 21m --no-dryrun
"""

import argparse
import logging
import os
import sys

from esretention import __version__
from esretention.connection import ClusterConfig, ESClientFactory
from esretention.exceptions import EsRetentionError
from esretention.index_manager import IndexManager
from esretention.retention import NamingConvention, RetentionConfig, RetentionRunner

logger = logging.getLogger("esretention")

LOG_LEVEL_ENV = "ESRETENTION_LOG_LEVEL"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]
LOG_FORMAT = "%(asctime)s %(levelname)-7s %(message)s"

_EPILOG = """示例:
  es-retention --url http://localhost:9200 --index-prefix zis-audit- --older-than 25m
  es-retention --url http://localhost:9200 --index-prefix kafka-zis-external-orders-notify- --date-pattern week --older-than 21m --no-dryrun
"""


def _default_log_level() -> str:
    level = os.environ.get(LOG_LEVEL_ENV, "INFO").upper()
    return level if level in LOG_LEVELS else "INFO"


def build_parser() -> argparse.ArgumentParser:
    """构建命令行参数解析器."""
    parser = argparse.ArgumentParser(
        prog="es-retention",
        description="按名称删除旧索引（按月或按周命名）",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--url", required=True, help="ES 集群地址")
    parser.add_argument("--username", help="Basic Auth 用户名")
    parser.add_argument("--password", help="Basic Auth 密码")
    parser.add_argument(
        "--index-prefix", default="zis-audit-", help="索引名称前缀（默认: %(default)s）"
    )
    parser.add_argument(
        "--older-than",
        default="25m",
        help="保留阈值，月龄大于或等于该值的索引将被删除（默认: %(default)s）",
    )
    parser.add_argument(
        "--date-pattern",
        choices=[c.value for c in NamingConvention],
        default=NamingConvention.MONTH.value,
        help="索引命名约定（默认: %(default)s）",
    )
    parser.add_argument(
        "--no-dryrun",
        action="store_true",
        help="实际删除索引（默认仅试运行）",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        type=str.upper,
        default=_default_log_level(),
        help=f"日志级别（默认取环境变量 {LOG_LEVEL_ENV}，否则为 INFO）",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(level: str) -> None:
    """配置根日志记录器."""
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)
    # 客户端底层请求日志过于冗长
    logging.getLogger("elastic_transport").setLevel(
        max(logging.WARNING, logging.getLevelName(level))
    )


def main(argv: list[str] | None = None) -> int:
    """命令行主函数.

    Returns:
        退出码：0 表示完成（即使部分索引删除失败），1 表示配置错误或列出索引失败
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        cluster = ClusterConfig(
            url=args.url,
            username=args.username,
            password=args.password,
        )
        config = RetentionConfig(
            index_prefix=args.index_prefix,
            older_than=args.older_than,
            date_pattern=NamingConvention(args.date_pattern),
            dry_run=not args.no_dryrun,
        )
    except EsRetentionError as e:
        logger.error(f"配置错误: {e}")
        return 1

    logger.debug(
        f"ES 地址: {cluster.url}，前缀: {config.index_prefix!r}，"
        f"命名约定: {config.date_pattern.value}，试运行: {config.dry_run}"
    )

    with ESClientFactory(cluster) as factory:
        runner = RetentionRunner(IndexManager(factory.get_client()), config)
        try:
            runner.run()
        except EsRetentionError as e:
            logger.error(f"执行失败: {e}")
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
