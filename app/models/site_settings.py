from sqlalchemy import Column, Integer, String, Text, DateTime
from app.core.database import Base, utcnow

class SiteSettings(Base):
    """Single-row store for site branding; always addressed through crud.site_settings."""
    __tablename__ = "site_settings"

    id = Column(Integer, primary_key=True)
    primary_color = Column(String, nullable=False, default="#2563eb")
    secondary_color = Column(String, nullable=False, default="#f59e0b")
    hero_title = Column(String, nullable=True)
    hero_description = Column(Text, nullable=True)
    teacher_name = Column(String, nullable=True)
    teacher_subject = Column(String, nullable=True)
    teacher_photo = Column(String, nullable=True)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)
