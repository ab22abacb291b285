"""
Exams Infrastructure Models
===========================

SQLAlchemy ORM models for the exams module.
"""

from typing import Optional

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database import Base


class ExamModel(Base):
    """Database model for the Exam entity."""
    __tablename__ = "exams"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)


class QuestionModel(Base):
    """
    Database model for a question text.

    exam_id is nullable: batches saved through the question catalog carry
    no exam reference.
    """
    __tablename__ = "questions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    exam_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("exams.id", ondelete="CASCADE"),
        nullable=True,
        index=True
    )

    # Order within the exam
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    text: Mapped[str] = mapped_column(Text, nullable=False)
