import logging
from collections import Counter
from typing import List, Optional

from adapters import DateBucketMap, file_extension, get_adapter

LOGGER_NAME = "cookieanalyzer"

logger = logging.getLogger(LOGGER_NAME)

NO_DATA_MESSAGE = "There are no cookies for this date. Please make sure the date is formatted YYYY-MM-DD"


def most_active_cookies(date_buckets: DateBucketMap, date: str) -> Optional[List[str]]:
    """
    找出指定日期出現次數最多的 cookie
    回傳: 同票的全部 cookie (依第一次出現的順序)，該日期沒有資料時回傳 None
    """
    cookies = date_buckets.get(date)

    if not cookies:
        return None

    counts = Counter(cookies) # Counter 保留插入順序
    max_count = max(counts.values())

    return [cookie for cookie, count in counts.items() if count == max_count]


class CookieAnalyzer:

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding
        self.date_buckets: DateBucketMap = {}

    def load_content(self, content: str, extension: str) -> None:
        adapter = get_adapter(extension)
        self.date_buckets = adapter.parse_file_content(content)
        logger.info(
            "loaded %d cookie(s) across %d date(s)",
            sum(len(cookies) for cookies in self.date_buckets.values()),
            len(self.date_buckets),
        )

    def load_file(self, file_path: str) -> None:
        """
        讀檔後依副檔名選 adapter，讀不到檔案時 OSError 往外丟
        """
        try:
            with open(file_path, 'r', encoding=self.encoding) as f:
                content = f.read()
        except UnicodeDecodeError as e:
            raise OSError(f"{file_path} is not valid {self.encoding} text: {e}") from e

        self.load_content(content, file_extension(file_path))

    def most_active_cookies(self, date: str) -> Optional[List[str]]:
        winners = most_active_cookies(self.date_buckets, date)
        if winners is None:
            logger.info("no cookies found for %s", date)
        else:
            logger.info("%d most active cookie(s) for %s", len(winners), date)
        return winners
