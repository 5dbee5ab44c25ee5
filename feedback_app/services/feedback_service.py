import logging

from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError

from feedback_app.extensions import db
from feedback_app.models.feedback import Feedback
from feedback_app.utils.dates import utcnow, to_utc_naive

logger = logging.getLogger(__name__)


class PersistenceError(Exception):
    """Store tidak bisa dihubungi atau menolak operasi tulis/baca."""


def redacted_url(url) -> str:
    """Connection string aman untuk log (password disembunyikan)."""
    try:
        return make_url(str(url)).render_as_string(hide_password=True)
    except Exception:
        return "<unparseable database url>"


def init_store(app):
    """
    Cek koneksi store saat startup dan buat tabel kalau belum ada.
    Gagal -> PersistenceError (proses harus berhenti).
    """
    url = app.config["SQLALCHEMY_DATABASE_URI"]
    with app.app_context():
        try:
            db.session.execute(text("SELECT 1"))
            db.create_all()
        except SQLAlchemyError as exc:
            logger.error("Database connection error (%s): %s", redacted_url(url), exc)
            raise PersistenceError(f"cannot connect to {redacted_url(url)}") from exc
        finally:
            db.session.remove()
    logger.info("Database connected: %s", redacted_url(url))


def submit_feedback(location, rating, reasons) -> Feedback:
    """
    Simpan satu feedback. Nilai location/rating TIDAK divalidasi,
    apa pun yang dikirim disimpan apa adanya.
    """
    fb = Feedback(
        location=location,
        rating=rating,
        reasons=reasons,
        created_at=utcnow(),
    )
    try:
        db.session.add(fb)
        db.session.commit()
    except SQLAlchemyError as exc:
        db.session.rollback()
        raise PersistenceError("failed to save feedback") from exc
    return fb


def list_feedback(start_date=None, end_date=None) -> list:
    """
    Semua feedback (opsional difilter rentang tanggal, inklusif),
    urut terbaru dulu.
    """
    query = Feedback.query
    if start_date is not None:
        query = query.filter(Feedback.created_at >= to_utc_naive(start_date))
    if end_date is not None:
        query = query.filter(Feedback.created_at <= to_utc_naive(end_date))

    try:
        return query.order_by(Feedback.created_at.desc(), Feedback.id.desc()).all()
    except SQLAlchemyError as exc:
        db.session.rollback()
        raise PersistenceError("failed to fetch feedback") from exc
