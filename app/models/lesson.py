from sqlalchemy import Column, Integer, String, Text, DateTime
from sqlalchemy.orm import relationship
from app.core.database import Base, utcnow

class Lesson(Base):
    __tablename__ = "lessons"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, index=True, nullable=False)
    description = Column(Text, nullable=True)
    level = Column(String, index=True, nullable=False)  # free text in practice, e.g. "مبتدئ"
    thumbnail = Column(String, nullable=True)
    video_count = Column(Integer, nullable=False, default=0)
    file_count = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, index=True)
    updated_at = Column(DateTime(timezone=True), nullable=True, onupdate=utcnow)

    videos = relationship(
        "Video", back_populates="lesson", order_by="Video.created_at", cascade="all, delete-orphan"
    )
    files = relationship(
        "LessonFile", back_populates="lesson", order_by="LessonFile.created_at", cascade="all, delete-orphan"
    )
