from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from feedback_app.extensions import db
from feedback_app.utils.dates import utcnow, isoformat_utc, parse_iso_datetime


class Feedback(db.Model):
    __tablename__ = "feedbacks"

    id = db.Column(db.Integer, primary_key=True)

    # Check-in / Arrivals / Departure (tidak divalidasi di server)
    location = db.Column(db.String(100), nullable=True)

    # Very Bad .. Very Good (tidak divalidasi di server)
    rating = db.Column(db.String(50), nullable=True)

    reasons = db.Column(db.Text, nullable=True)

    # selalu diisi server saat insert, disimpan sebagai UTC naive
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False, index=True)

    def to_dict(self):
        return {
            "_id": str(self.id),
            "location": self.location,
            "rating": self.rating,
            "reasons": self.reasons,
            "createdAt": isoformat_utc(self.created_at) if self.created_at else None,
        }

    def to_record(self):
        return FeedbackRecord(
            id=str(self.id),
            location=self.location,
            rating=self.rating,
            reasons=self.reasons,
            created_at=self.created_at,
        )

    def __repr__(self):
        return f"<Feedback {self.id} {self.location} {self.rating}>"


@dataclass(frozen=True)
class FeedbackRecord:
    """Satu feedback yang sudah diambil ke memori (input mesin agregasi)."""

    location: Optional[str]
    rating: Optional[str]
    reasons: Optional[str]
    created_at: Optional[datetime]
    id: Optional[str] = None

    @classmethod
    def from_json(cls, data: dict) -> "FeedbackRecord":
        created = data.get("createdAt")
        return cls(
            id=data.get("_id") or data.get("id"),
            location=data.get("location"),
            rating=data.get("rating"),
            reasons=data.get("reasons"),
            created_at=parse_iso_datetime(created) if created else None,
        )
