from datetime import datetime, timedelta, timezone

EPOCH = datetime(1970, 1, 1)


def utcnow() -> datetime:
    """Текущее время UTC (naive, как datetime.utcnow)"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_naive_utc(value: datetime) -> datetime:
    """Приводит datetime к naive UTC, чтобы сравнивать с utcnow()"""
    if value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def parse_datetime(value) -> datetime:
    """Разбор ISO-строки из хранилища ("2024-05-01T10:00", "...Z")"""
    if isinstance(value, datetime):
        return to_naive_utc(value)
    text = str(value).strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return to_naive_utc(datetime.fromisoformat(text))


def isoformat_js(value: datetime) -> str:
    """Формат Date.toISOString(): миллисекунды и суффикс Z"""
    value = to_naive_utc(value)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def format_file_size(size) -> str:
    """Человекочитаемый размер файла (1024-based)"""
    try:
        size = float(size)
    except (TypeError, ValueError):
        return "0 Bytes"
    if size != size or size <= 0:
        return "0 Bytes"
    
    units = ["Bytes", "KB", "MB", "GB"]
    i = 0
    while size >= 1024 and i < len(units) - 1:
        size /= 1024
        i += 1
    
    return f"{round(size, 2):g} {units[i]}"


def epoch_ms(value: datetime) -> int:
    """Миллисекунды с начала эпохи (как Date.now())"""
    return (to_naive_utc(value) - EPOCH) // timedelta(milliseconds=1)
