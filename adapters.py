import logging
from collections import defaultdict
from pathlib import Path
from typing import Dict, List, Optional, Protocol

from pydantic import ValidationError

from schemas import LogRecord

logger = logging.getLogger("cookieanalyzer.adapters")

DateBucketMap = Dict[str, List[str]]

FIELD_SEPARATOR = ","


class FormatAdapter(Protocol):
    """
    不同檔案格式的解析介面，回傳 date -> cookie list
    """
    def parse_file_content(self, content: str) -> DateBucketMap:
        ...


def bucket_by_date(records) -> DateBucketMap:
    """
    依日期分組，保留輸入順序與重複的 cookie
    """
    buckets: Dict[str, List[str]] = defaultdict(list)
    for record in records:
        buckets[record.date].append(record.cookie_id)
    return dict(buckets) # 轉回一般 dict，避免查詢時自動新增 key


class CsvLogAdapter:
    """
    cookie,timestamp 格式的 CSV log
    """

    def parse_line(self, line: str) -> Optional[LogRecord]:
        parts = line.split(FIELD_SEPARATOR)

        if len(parts) < 2:
            return None

        cookie_id, timestamp = parts[0], parts[1] # 多出來的欄位忽略

        try:
            return LogRecord.from_fields(cookie_id, timestamp)
        except ValidationError:
            return None

    def parse_records(self, content: str) -> List[LogRecord]:
        lines = content.strip().split("\n") # 只認 \n，其他控制字元留在欄位裡
        records = []
        dropped = 0

        for line in lines[1:]: # 第一行是 header
            record = self.parse_line(line.rstrip("\r"))
            if record is None:
                dropped += 1
                continue
            records.append(record)

        if dropped:
            logger.debug("dropped %d malformed line(s)", dropped)
        return records

    def parse_file_content(self, content: str) -> DateBucketMap:
        return bucket_by_date(self.parse_records(content))


class NullLogAdapter:
    """
    不支援的格式，什麼都不解析
    """
    def parse_file_content(self, content: str) -> DateBucketMap:
        return {}


ADAPTERS: Dict[str, FormatAdapter] = {
    "csv": CsvLogAdapter(),
}

NULL_ADAPTER = NullLogAdapter()


def _normalize_extension(extension: str) -> str:
    return extension.lstrip(".").lower()


def register_adapter(extension: str, adapter: FormatAdapter) -> None:
    ADAPTERS[_normalize_extension(extension)] = adapter


def get_adapter(extension: str) -> FormatAdapter:
    adapter = ADAPTERS.get(_normalize_extension(extension))
    if adapter is None:
        logger.warning("no adapter for extension %r, nothing will be parsed", extension)
        return NULL_ADAPTER
    return adapter


def file_extension(path) -> str:
    """
    檔名最後一個 "." 之後的部分，".csv" 這種檔名也算 csv
    """
    name = Path(path).name
    if "." not in name:
        return ""
    return name.rsplit(".", 1)[-1].lower()
