"""
Exams Domain Layer
==================

Domain layer for the exams module.

Contains:
- Entities: Core business objects (Exam)

This layer is framework-agnostic and contains pure business logic.
"""

from exams.domain.entities import Exam

__all__ = [
    "Exam",
]
