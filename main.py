import argparse
import codecs
import logging
import os
import sys
from typing import List, Optional

from dotenv import load_dotenv

from cookieanalyzer import LOGGER_NAME, NO_DATA_MESSAGE, CookieAnalyzer

# 12-Factor App: Load config from environment
load_dotenv()

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_ENCODING = "utf-8"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="most-active-cookie",
        description="Print the most active cookie(s) of a given day from a cookie log.",
    )
    parser.add_argument("-f", "--file", required=True, help="cookie log 檔案路徑 (例如 cookie_log.csv)")
    parser.add_argument("-d", "--date", required=True, help="查詢日期，格式 YYYY-MM-DD")
    parser.add_argument("-v", "--verbose", action="store_true", help="顯示 debug log")
    return parser.parse_args(argv)


def resolve_log_level(name: str) -> Optional[int]:
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else None # 不認得的名稱會拿到 "Level XXX" 字串


def setup_logger(verbose: bool) -> logging.Logger:
    """
    log 一律寫到 stderr，stdout 只留結果
    COOKIE_ANALYZER_LOG_LEVEL 不是合法的 level 時退回 WARNING
    """
    level_name = os.getenv("COOKIE_ANALYZER_LOG_LEVEL", DEFAULT_LOG_LEVEL)
    level = resolve_log_level(level_name)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else (level if level is not None else logging.WARNING))
    logger.propagate = False

    logger.handlers.clear()

    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
    logger.addHandler(handler)

    if level is None:
        logger.warning("unknown log level %r in COOKIE_ANALYZER_LOG_LEVEL, using %s", level_name, DEFAULT_LOG_LEVEL)
    return logger


def resolve_encoding(logger: logging.Logger) -> str:
    encoding = os.getenv("COOKIE_ANALYZER_ENCODING", DEFAULT_ENCODING)
    try:
        codecs.lookup(encoding)
    except LookupError:
        logger.warning("unknown encoding %r in COOKIE_ANALYZER_ENCODING, using %s", encoding, DEFAULT_ENCODING)
        return DEFAULT_ENCODING
    return encoding


def main(argv: Optional[List[str]] = None) -> int:
    """
    回傳 exit code，缺參數時由 argparse 直接結束 (exit 2)
    """
    args = parse_args(argv)
    logger = setup_logger(args.verbose)
    logger.debug("analyzing %s for %s", args.file, args.date)

    analyzer = CookieAnalyzer(encoding=resolve_encoding(logger))
    try:
        analyzer.load_file(args.file)
    except OSError as e:
        print(f"Error: Cannot read file '{args.file}'", file=sys.stderr)
        print(e, file=sys.stderr)
        return 1

    winners = analyzer.most_active_cookies(args.date)
    if winners is None:
        print(NO_DATA_MESSAGE)
        return 0

    for cookie in winners:
        print(cookie)
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
