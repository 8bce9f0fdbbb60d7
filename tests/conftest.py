import logging

import pytest

SAMPLE_LOG = """cookie,timestamp
AtY0laUfhglK3lC7,2018-12-09T14:19:00+00:00
SAZuXPGUrfbcn5UA,2018-12-09T10:13:00+00:00
5UAVanZf6UtGyKVS,2018-12-09T07:25:00+00:00
AtY0laUfhglK3lC7,2018-12-09T06:19:00+00:00
SAZuXPGUrfbcn5UA,2018-12-08T22:03:00+00:00
4sMM2LxV07bPJzwf,2018-12-08T21:30:00+00:00
fbcn5UAVanZf6UtG,2018-12-08T09:30:00+00:00
4sMM2LxV07bPJzwf,2018-12-07T23:30:00+00:00
"""

@pytest.fixture
def sample_log():
    return SAMPLE_LOG

@pytest.fixture
def write_log(tmp_path):
    """
    把 log 內容寫到暫存檔，回傳路徑
    """
    def _write(content: str, name: str = "cookie_log.csv"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path
    return _write

@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    # 本機的 .env 或環境變數不影響測試
    monkeypatch.delenv("COOKIE_ANALYZER_LOG_LEVEL", raising=False)
    monkeypatch.delenv("COOKIE_ANALYZER_ENCODING", raising=False)

@pytest.fixture(autouse=True)
def reset_logger():
    # main() 會在 cookieanalyzer logger 掛 handler，測試間清掉
    yield
    logger = logging.getLogger("cookieanalyzer")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
