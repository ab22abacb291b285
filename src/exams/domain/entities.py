"""
Exams Domain Entities
=====================

Pure Python business objects for the exams module.
"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class Exam:
    """
    Exam entity.

    The name is the lookup key. The id stays None until the exam
    catalog saves the exam and assigns one. Questions are filled in by
    the exam service, never by the exam catalog.
    """
    id: Optional[int]  # None for exams that were never saved
    name: str
    questions: List[str] = field(default_factory=list)

    @property
    def is_new(self) -> bool:
        """Check if the exam has not been saved yet."""
        return self.id is None

    @property
    def has_questions(self) -> bool:
        return len(self.questions) > 0
