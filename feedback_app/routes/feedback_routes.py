from flask import Blueprint, request, current_app

from feedback_app.services.feedback_service import (
    PersistenceError,
    list_feedback,
    submit_feedback,
)
from feedback_app.utils.dates import parse_iso_datetime
from feedback_app.utils.response import success, error

feedback_bp = Blueprint("feedback", __name__, url_prefix="/api/feedback")


def _date_arg(name):
    raw = request.args.get(name)
    if not raw:
        return None
    return parse_iso_datetime(raw)


@feedback_bp.route("", methods=["POST"])
def create_feedback():
    """
    POST /api/feedback
    Body JSON:
    {
      "location": "Check-in",
      "rating": "Good",
      "reasons": "Antrian cepat"
    }
    Tidak ada validasi field, semua disimpan apa adanya.
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        # body bukan object JSON -> semua field kosong
        data = {}

    try:
        fb = submit_feedback(
            location=data.get("location"),
            rating=data.get("rating"),
            reasons=data.get("reasons"),
        )
    except PersistenceError:
        current_app.logger.exception("Error saving feedback")
        return error("Server error", 500)

    return success(fb.to_dict(), 201)


@feedback_bp.route("", methods=["GET"])
def get_feedback():
    """
    GET /api/feedback?startDate=2024-01-01&endDate=2024-01-31T23:59:59Z
    -> list feedback, terbaru dulu
    """
    try:
        start_date = _date_arg("startDate")
        end_date = _date_arg("endDate")
    except ValueError:
        current_app.logger.error(
            "Error fetching feedback: invalid date range startDate=%r endDate=%r",
            request.args.get("startDate"), request.args.get("endDate"),
        )
        return error("Server error", 500)

    try:
        rows = list_feedback(start_date=start_date, end_date=end_date)
    except PersistenceError:
        current_app.logger.exception("Error fetching feedback")
        return error("Server error", 500)

    return success([r.to_dict() for r in rows])
