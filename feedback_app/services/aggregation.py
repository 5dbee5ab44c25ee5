"""
Agregasi feedback untuk dashboard.

Semua fungsi di sini murni: input tidak diubah, tidak ada I/O, dan "sekarang"
selalu dikirim sebagai parameter ``reference`` supaya hasilnya deterministik.
"""
import calendar
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone
from enum import Enum
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

RATING_CATEGORIES = ("Very Bad", "Bad", "Average", "Good", "Very Good")
LOCATION_CATEGORIES = ("Check-in", "Arrivals", "Departure")

END_OF_DAY = time(23, 59, 59, 999000)


class Window(str, Enum):
    ALL = "all"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


def parse_window(value) -> Window:
    """Keyword tidak dikenal / kosong -> ALL (perilaku selector dashboard)."""
    if isinstance(value, Window):
        return value
    try:
        return Window((value or "").strip().lower())
    except ValueError:
        return Window.ALL


@dataclass(frozen=True)
class AggregationResult:
    window: Window
    start: Optional[datetime]
    end: Optional[datetime]
    records: Tuple
    rating_counts: Dict[str, int]
    location_counts: Dict[str, int]
    unrecognized_ratings: int = 0
    unrecognized_locations: int = 0

    @property
    def total(self) -> int:
        return len(self.records)


def _start_of(day: date, tzinfo) -> datetime:
    return datetime.combine(day, time.min, tzinfo=tzinfo)


def _end_of(day: date, tzinfo) -> datetime:
    return datetime.combine(day, END_OF_DAY, tzinfo=tzinfo)


def window_bounds(window: Window, reference: datetime) -> Tuple[Optional[datetime], Optional[datetime]]:
    """
    (start, end) inklusif untuk window, dalam timezone ``reference``.
    ALL -> (None, None).
    """
    window = Window(window)
    tz = reference.tzinfo
    today = reference.date()

    if window is Window.DAILY:
        return _start_of(today, tz), _end_of(today, tz)

    if window is Window.WEEKLY:
        # minggu dimulai hari Minggu (Minggu=0 .. Sabtu=6)
        days_since_sunday = (today.weekday() + 1) % 7
        first = today - timedelta(days=days_since_sunday)
        last = first + timedelta(days=6)
        return _start_of(first, tz), _end_of(last, tz)

    if window is Window.MONTHLY:
        last_day = calendar.monthrange(today.year, today.month)[1]
        return (
            _start_of(today.replace(day=1), tz),
            _end_of(today.replace(day=last_day), tz),
        )

    if window is Window.YEARLY:
        return (
            _start_of(date(today.year, 1, 1), tz),
            _end_of(date(today.year, 12, 31), tz),
        )

    return None, None


def _align(value: datetime, reference: datetime) -> datetime:
    """Samakan timestamp record dengan kerangka waktu reference."""
    if reference.tzinfo is None:
        if value.tzinfo is None:
            return value
        return value.astimezone().replace(tzinfo=None)
    if value.tzinfo is None:
        # timestamp naive dari store = UTC
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(reference.tzinfo)


def filter_records(records: Sequence, window: Window, reference: datetime) -> List:
    window = Window(window)
    if window is Window.ALL:
        return list(records)

    start, end = window_bounds(window, reference)
    selected = []
    for item in records:
        created = item.created_at
        if created is None:
            continue
        if start <= _align(created, reference) <= end:
            selected.append(item)
    return selected


def tally(values: Iterable, categories: Sequence[str]) -> Tuple[Dict[str, int], int]:
    """
    Histogram dengan key tetap (urutan = urutan kategori, semua mulai 0).
    Nilai di luar kategori tidak masuk histogram, hanya dihitung di
    angka kedua (unrecognized).
    """
    counts = {category: 0 for category in categories}
    unrecognized = 0
    for value in values:
        if value in counts:
            counts[value] += 1
        else:
            unrecognized += 1
    return counts, unrecognized


def rating_counts(records: Iterable) -> Dict[str, int]:
    return tally((r.rating for r in records), RATING_CATEGORIES)[0]


def location_counts(records: Iterable) -> Dict[str, int]:
    return tally((r.location for r in records), LOCATION_CATEGORIES)[0]


def aggregate(records: Sequence, window, reference: datetime) -> AggregationResult:
    window = parse_window(window)
    filtered = filter_records(records, window, reference)
    start, end = window_bounds(window, reference)

    ratings, bad_ratings = tally((r.rating for r in filtered), RATING_CATEGORIES)
    locations, bad_locations = tally((r.location for r in filtered), LOCATION_CATEGORIES)

    return AggregationResult(
        window=window,
        start=start,
        end=end,
        records=tuple(filtered),
        rating_counts=ratings,
        location_counts=locations,
        unrecognized_ratings=bad_ratings,
        unrecognized_locations=bad_locations,
    )
