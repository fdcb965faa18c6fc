from sqlalchemy import Boolean, Column, Integer, String, Text, DateTime
from app.core.database import Base, utcnow

class Message(Base):
    __tablename__ = "messages"

    id = Column(Integer, primary_key=True, index=True)
    student_name = Column(String, nullable=False)
    phone = Column(String, nullable=True)
    email = Column(String, nullable=True)
    content = Column(Text, nullable=False)
    is_read = Column(Boolean(), nullable=False, default=False, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, index=True)
