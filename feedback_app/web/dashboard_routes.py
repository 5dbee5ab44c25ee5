# feedback_app/web/dashboard_routes.py

from io import BytesIO

from flask import Blueprint, render_template, request, send_file, current_app

from feedback_app.services.dashboard import DashboardState, WINDOW_OPTIONS, chart_payload
from feedback_app.services.export_service import (
    PDF_FILENAME,
    XLSX_FILENAME,
    build_rows,
    export_pdf,
    export_xlsx,
)
from feedback_app.services.feedback_service import list_feedback

dashboard_bp = Blueprint("dashboard", __name__, url_prefix="/dashboard")


def _load_records():
    return [row.to_record() for row in list_feedback()]


def _state() -> DashboardState:
    state = current_app.extensions.get("dashboard_state")
    if state is None:
        state = DashboardState(_load_records)
        current_app.extensions["dashboard_state"] = state
    return state


def _current_view():
    state = _state()
    state.refresh()
    return state.view(request.args.get("window"))


@dashboard_bp.route("", methods=["GET"])
def dashboard():
    result = _current_view()
    return render_template(
        "web/dashboard.html",
        window=result.window.value,
        window_options=WINDOW_OPTIONS,
        charts=chart_payload(result),
        rows=build_rows(result.records),
        unrecognized_ratings=result.unrecognized_ratings,
        unrecognized_locations=result.unrecognized_locations,
    )


# ======================
# EXPORT (view yang sedang difilter)
# ======================
@dashboard_bp.route("/export.pdf", methods=["GET"])
def export_dashboard_pdf():
    result = _current_view()
    buf = BytesIO()
    export_pdf(result.records, buf)
    buf.seek(0)
    return send_file(buf, mimetype="application/pdf", as_attachment=True, download_name=PDF_FILENAME)


@dashboard_bp.route("/export.xlsx", methods=["GET"])
def export_dashboard_xlsx():
    result = _current_view()
    buf = BytesIO()
    export_xlsx(result.records, buf)
    buf.seek(0)
    return send_file(
        buf,
        mimetype="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        as_attachment=True,
        download_name=XLSX_FILENAME,
    )
