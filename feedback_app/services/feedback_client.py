import requests

from feedback_app.models.feedback import FeedbackRecord
from feedback_app.utils.dates import isoformat_utc


class FeedbackClientError(Exception):
    """Gagal bicara dengan API feedback (network / status bukan 2xx)."""


class FeedbackClient:
    def __init__(self, base_url="http://localhost:5000", timeout=15):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    @property
    def feedback_url(self) -> str:
        return f"{self.base_url}/api/feedback"

    def _request(self, method, **kwargs):
        try:
            resp = requests.request(method, self.feedback_url, timeout=self.timeout, **kwargs)
        except requests.RequestException as exc:
            raise FeedbackClientError(f"{method} {self.feedback_url} gagal: {exc}") from exc

        if not resp.ok:
            raise FeedbackClientError(
                f"{method} {self.feedback_url} -> HTTP {resp.status_code}: {resp.text[:200]}"
            )
        try:
            return resp.json()
        except ValueError as exc:
            raise FeedbackClientError("respon API bukan JSON") from exc

    def fetch_all(self, start_date=None, end_date=None):
        """
        GET /api/feedback -> list FeedbackRecord (urut terbaru dulu)
        """
        params = {}
        if start_date is not None:
            params["startDate"] = isoformat_utc(start_date)
        if end_date is not None:
            params["endDate"] = isoformat_utc(end_date)

        data = self._request("GET", params=params or None)
        try:
            return [FeedbackRecord.from_json(item) for item in data]
        except (TypeError, ValueError, AttributeError) as exc:
            raise FeedbackClientError("format data feedback tidak dikenali") from exc

    def submit(self, location, rating, reasons) -> FeedbackRecord:
        data = self._request(
            "POST",
            json={"location": location, "rating": rating, "reasons": reasons},
        )
        return FeedbackRecord.from_json(data)
