"""
Exams Infrastructure Layer
==========================

Infrastructure implementations for the exams module.

Contains:
- Models: SQLAlchemy ORM models
- Repositories: In-memory and SQLAlchemy catalog implementations
- Sample data: The fixed catalog the in-memory repositories start from
"""

from exams.infrastructure.models import ExamModel, QuestionModel
from exams.infrastructure.repositories import (
    InMemoryExamRepository,
    InMemoryQuestionRepository,
    SQLAlchemyExamRepository,
    SQLAlchemyQuestionRepository
)

__all__ = [
    "ExamModel",
    "QuestionModel",
    "InMemoryExamRepository",
    "InMemoryQuestionRepository",
    "SQLAlchemyExamRepository",
    "SQLAlchemyQuestionRepository",
]
