from pydantic import BaseModel, ConfigDict, Field, field_validator

DATE_TIME_SEPARATOR = "T"

class LogRecord(BaseModel):
    """
    一筆 cookie log 的資料定義
    """
    model_config = ConfigDict(frozen=True)

    cookie_id: str = Field(..., min_length=1, description="cookie 的 id")
    date: str = Field(..., min_length=1, description="日期 (YYYY-MM-DD)")

    @classmethod
    def from_fields(cls, cookie_id: str, timestamp: str) -> "LogRecord":
        return cls(cookie_id=cookie_id, date=timestamp)

    @field_validator('date', mode='before')
    @classmethod
    def truncate_to_date(cls, v):
        """
        取 "T" 之前的日期部分。
        timestamp 以 "T" 開頭時日期是空字串，會被 min_length 擋下，整行視為格式錯誤丟掉
        """
        if isinstance(v, str):
            return v.split(DATE_TIME_SEPARATOR, 1)[0] # 只留日期，忽略時間與時區
        return v
