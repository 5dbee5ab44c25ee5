from datetime import datetime, timezone


def truncate_to_millis(value: datetime) -> datetime:
    """Potong ke presisi milidetik (batas window berakhir di .999)."""
    return value.replace(microsecond=value.microsecond // 1000 * 1000)


def utcnow() -> datetime:
    """Waktu sekarang dalam UTC naive, presisi milidetik (format yang disimpan di database)."""
    return truncate_to_millis(datetime.now(timezone.utc).replace(tzinfo=None))


def local_now() -> datetime:
    """Waktu lokal server, timezone-aware."""
    return datetime.now().astimezone()


def to_utc_naive(value: datetime) -> datetime:
    # naive dianggap sudah UTC
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def as_aware_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def isoformat_utc(value: datetime) -> str:
    """
    Format ISO 8601 UTC dengan presisi milidetik, mis. 2024-02-29T10:15:00.000Z
    """
    value = as_aware_utc(value)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def parse_iso_datetime(value: str) -> datetime:
    """
    Parse string ISO 8601 (boleh tanggal saja, boleh akhiran Z).
    Raise ValueError kalau formatnya tidak dikenali.
    """
    text = (value or "").strip()
    if not text:
        raise ValueError("tanggal kosong")
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


def format_display_date(value: datetime) -> str:
    """
    Tanggal untuk tabel & ekspor, gaya en-US: "Oct 19, 2026, 01:05 PM".
    Timestamp naive dianggap UTC lalu dikonversi ke waktu lokal.
    """
    local = as_aware_utc(value).astimezone()
    return f"{local:%b} {local.day}, {local.year}, {local:%I:%M %p}"
