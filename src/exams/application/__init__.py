"""
Exams Application Layer
=======================

Application layer for the exams module.

Contains:
- Services: Business logic orchestration
- Repository interfaces the infrastructure layer implements
"""

from exams.application.services import (
    ExamService,
    IExamRepository,
    IQuestionRepository
)

__all__ = [
    # Services
    "ExamService",
    # Repository Interfaces
    "IExamRepository",
    "IQuestionRepository",
]
