import logging

from feedback_app.services.aggregation import (
    LOCATION_CATEGORIES,
    RATING_CATEGORIES,
    Window,
    aggregate,
    parse_window,
)
from feedback_app.services.feedback_client import FeedbackClientError
from feedback_app.services.feedback_service import PersistenceError
from feedback_app.utils.dates import local_now

logger = logging.getLogger(__name__)

RATING_COLORS = ["#FF6384", "#36A2EB", "#FFCE56", "#4BC0C0", "#9966FF"]
LOCATION_COLORS = ["#FF6384", "#36A2EB", "#FFCE56"]

WINDOW_OPTIONS = [
    (Window.ALL, "All"),
    (Window.DAILY, "Daily"),
    (Window.WEEKLY, "Weekly"),
    (Window.MONTHLY, "Monthly"),
    (Window.YEARLY, "Yearly"),
]


class DashboardState:
    """
    State dashboard: daftar feedback yang terakhir berhasil diambil.
    ``fetch_records`` = callable tanpa argumen yang mengembalikan records.
    """

    def __init__(self, fetch_records):
        self._fetch_records = fetch_records
        self.records = []

    def refresh(self) -> bool:
        # gagal fetch -> cukup log, data lama dipertahankan
        try:
            self.records = list(self._fetch_records())
        except (PersistenceError, FeedbackClientError) as exc:
            logger.error("Error fetching feedback: %s", exc)
            return False
        return True

    def view(self, window=Window.ALL, reference=None):
        return aggregate(self.records, parse_window(window), reference or local_now())


def chart_payload(result):
    """Data untuk 2 bar chart (Chart.js), label sesuai urutan kategori."""
    return {
        "ratings": {
            "labels": list(RATING_CATEGORIES),
            "datasets": [{
                "label": "Feedback Ratings",
                "data": [result.rating_counts[k] for k in RATING_CATEGORIES],
                "backgroundColor": RATING_COLORS,
            }],
        },
        "locations": {
            "labels": list(LOCATION_CATEGORIES),
            "datasets": [{
                "label": "Feedback by Location",
                "data": [result.location_counts[k] for k in LOCATION_CATEGORIES],
                "backgroundColor": LOCATION_COLORS,
            }],
        },
    }
