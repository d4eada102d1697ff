# models/simulation.py

import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, String, DateTime, JSON, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from app.core.config import Base


class Simulation(Base):
    """Stored AI insight for one user and domain. Never updated after creation."""

    __tablename__ = "simulation"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid(as_uuid=True), ForeignKey("user_profile.id", ondelete="CASCADE"), nullable=False, index=True)

    domain = Column(String(32), nullable=False)
    timeline = Column(String(20), nullable=False, default="30days")

    # {trend, prediction, future_outcome, suggestions, data_points, last_updated, generated_by}
    projection = Column(JSON, nullable=False)

    generated_at = Column(DateTime, default=lambda: datetime.now(timezone.utc), index=True)

    user = relationship("UserProfile", back_populates="simulations")
