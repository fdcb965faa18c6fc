from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, BigInteger
from sqlalchemy.orm import relationship
from app.core.database import Base, utcnow
from app.core.constants import FileTypeEnum

class LessonFile(Base):
    __tablename__ = "files"

    id = Column(Integer, primary_key=True, index=True)
    lesson_id = Column(Integer, ForeignKey("lessons.id"), nullable=False, index=True)
    name = Column(String, nullable=False)
    url = Column(String, nullable=False)
    type = Column(String, nullable=False, default=FileTypeEnum.PDF.value)
    size = Column(BigInteger, nullable=False, default=0)  # bytes
    downloads = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, index=True)

    lesson = relationship("Lesson", back_populates="files")
