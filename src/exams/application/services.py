"""
Exams Application Services
==========================

Application service that composes exams with their questions.

Orchestrates the exam catalog and the question catalog through the
repository interfaces below; concrete implementations are injected.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from core import ExamNotFoundException
from exams.domain import Exam
from shared.infrastructure.logging import get_logger

logger = get_logger(__name__)


# ========== Repository Interfaces ==========

class IExamRepository(ABC):
    """Interface for exam catalog access."""

    @abstractmethod
    def find_all(self) -> List[Exam]:
        """Get every known exam, in catalog order."""

    @abstractmethod
    def save(self, exam: Exam) -> Exam:
        """Persist an exam and return the stored value (id assigned if new)."""


class IQuestionRepository(ABC):
    """Interface for question catalog access."""

    @abstractmethod
    def find_questions_by_exam_id(self, exam_id: Optional[int]) -> List[str]:
        """Get the questions of an exam. May reject a missing id."""

    @abstractmethod
    def save_questions(self, questions: List[str]) -> None:
        """Persist a batch of question texts."""


# ========== Application Services ==========

class ExamService:
    """
    Service for exam lookup and cascade save.

    Holds no state besides the two injected repositories. Errors raised by
    either repository are propagated untouched, and nothing is retried or
    rolled back.
    """

    def __init__(
        self,
        exam_repository: IExamRepository,
        question_repository: IQuestionRepository
    ):
        self._exam_repository = exam_repository
        self._question_repository = question_repository

    def find_exam_by_name(self, name: str) -> Optional[Exam]:
        """
        Find the first exam whose name matches exactly.

        Args:
            name: Exam name (case-sensitive)

        Returns:
            The matching Exam, or None when the catalog has no such name
        """
        return next(
            (exam for exam in self._exam_repository.find_all() if exam.name == name),
            None
        )

    def find_exam_by_name_with_questions(self, name: str) -> Exam:
        """
        Find an exam by name and attach its questions.

        Args:
            name: Exam name (case-sensitive)

        Returns:
            The Exam with questions loaded from the question catalog

        Raises:
            ExamNotFoundException: If no exam has the given name
        """
        exam = self.find_exam_by_name(name)
        if exam is None:
            logger.debug("Exam lookup missed", extra={"exam_name": name})
            raise ExamNotFoundException(name)

        exam.questions = self._question_repository.find_questions_by_exam_id(exam.id)

        logger.debug(
            "Exam composed",
            extra={"exam_id": exam.id, "exam_name": name}
        )
        return exam

    def save_exam(self, exam: Exam) -> Exam:
        """
        Save an exam, then its questions if it has any.

        The two writes are independent: when saving the questions fails the
        exam stays saved and the error reaches the caller.

        Args:
            exam: Exam to store

        Returns:
            The exam as returned by the exam catalog
        """
        saved_exam = self._exam_repository.save(exam)
        logger.info(
            "Exam saved",
            extra={"exam_id": saved_exam.id, "exam_name": saved_exam.name}
        )

        if exam.has_questions:
            self._question_repository.save_questions(exam.questions)
            logger.info(
                "Exam questions saved",
                extra={"exam_id": saved_exam.id, "question_count": len(exam.questions)}
            )

        return saved_exam
