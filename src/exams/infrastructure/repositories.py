"""
Exams Infrastructure Repositories
=================================

Concrete implementations of the exam and question repository interfaces.

- In-memory repositories seeded with the sample catalog
- SQLAlchemy repositories, one committed session per call
"""

from dataclasses import replace
from typing import Iterable, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from core import RepositoryException, ValidationException
from exams.application import IExamRepository, IQuestionRepository
from exams.domain import Exam
from exams.infrastructure.sample_data import sample_exams, sample_questions
from infrastructure.database import session_scope
from shared.infrastructure.logging import get_logger, log_latency

logger = get_logger(__name__)


def _require_exam_id(exam_id: Optional[int]) -> int:
    if exam_id is None:
        raise ValidationException(
            "An exam id is required to look up questions",
            {"exam_id": None}
        )
    return exam_id


# ========== In-memory ==========

class InMemoryExamRepository(IExamRepository):
    """
    Exam catalog kept in a list.

    Starts from the sample exams unless another list is given.
    """

    def __init__(self, exams: Optional[Iterable[Exam]] = None):
        self._exams: List[Exam] = (
            [replace(exam, questions=list(exam.questions)) for exam in exams]
            if exams is not None else sample_exams()
        )

    def find_all(self) -> List[Exam]:
        """Copies of every exam, in insertion order."""
        return [replace(exam, questions=list(exam.questions)) for exam in self._exams]

    def save(self, exam: Exam) -> Exam:
        """Store the exam, assigning the next id when it has none."""
        exam_id = self._next_id() if exam.is_new else exam.id
        stored = replace(exam, id=exam_id, questions=list(exam.questions))

        for index, existing in enumerate(self._exams):
            if existing.id == exam_id:
                self._exams[index] = stored
                break
        else:
            self._exams.append(stored)

        logger.info("Exam stored in memory", extra={"exam_id": exam_id, "exam_name": exam.name})
        return replace(stored, questions=list(stored.questions))

    def _next_id(self) -> int:
        ids = [exam.id for exam in self._exams if exam.id is not None]
        return max(ids) + 1 if ids else 1


class InMemoryQuestionRepository(IQuestionRepository):
    """
    Question catalog backed by a single question bank.

    Every exam id resolves to the same bank. Saved batches are recorded
    in order and do not change the bank.
    """

    def __init__(self, questions: Optional[Iterable[str]] = None):
        self._questions: List[str] = list(questions) if questions is not None else sample_questions()
        self._saved_batches: List[List[str]] = []

    @property
    def saved_batches(self) -> List[List[str]]:
        return [list(batch) for batch in self._saved_batches]

    def find_questions_by_exam_id(self, exam_id: Optional[int]) -> List[str]:
        _require_exam_id(exam_id)
        return list(self._questions)

    def save_questions(self, questions: List[str]) -> None:
        self._saved_batches.append(list(questions))
        logger.info("Questions stored in memory", extra={"question_count": len(questions)})


# ========== SQLAlchemy ==========

class SQLAlchemyExamRepository(IExamRepository):
    """
    SQLAlchemy implementation of the exam catalog.

    Every call runs in its own session scope and commits before returning.
    """

    def __init__(self, session_factory: sessionmaker[Session]):
        self._session_factory = session_factory

    def find_all(self) -> List[Exam]:
        """Every exam ordered by id."""
        from exams.infrastructure.models import ExamModel

        try:
            with session_scope(self._session_factory) as session:
                models = session.scalars(select(ExamModel).order_by(ExamModel.id)).all()
                return [Exam(id=model.id, name=model.name) for model in models]
        except SQLAlchemyError as e:
            raise RepositoryException(f"Failed to list exams: {e}")

    def save(self, exam: Exam) -> Exam:
        """Insert a new exam or update the one with the same id."""
        from exams.infrastructure.models import ExamModel

        try:
            with log_latency(logger, "exam_save", exam_name=exam.name):
                with session_scope(self._session_factory) as session:
                    model = None if exam.is_new else session.get(ExamModel, exam.id)
                    if model is None:
                        model = ExamModel(id=exam.id, name=exam.name)
                        session.add(model)
                    else:
                        model.name = exam.name

                    session.flush()
                    return Exam(id=model.id, name=model.name, questions=list(exam.questions))
        except SQLAlchemyError as e:
            raise RepositoryException(f"Failed to save exam {exam.name}: {e}")


class SQLAlchemyQuestionRepository(IQuestionRepository):
    """
    SQLAlchemy implementation of the question catalog.

    Batches saved through save_questions are stored without an exam
    reference; seed_questions binds questions to an exam.
    """

    def __init__(self, session_factory: sessionmaker[Session]):
        self._session_factory = session_factory

    def find_questions_by_exam_id(self, exam_id: Optional[int]) -> List[str]:
        """Question texts of an exam, in position order."""
        from exams.infrastructure.models import QuestionModel

        _require_exam_id(exam_id)

        try:
            with session_scope(self._session_factory) as session:
                stmt = (
                    select(QuestionModel.text)
                    .where(QuestionModel.exam_id == exam_id)
                    .order_by(QuestionModel.position, QuestionModel.id)
                )
                return list(session.scalars(stmt).all())
        except SQLAlchemyError as e:
            raise RepositoryException(f"Failed to load questions for exam {exam_id}: {e}")

    def save_questions(self, questions: List[str]) -> None:
        self._store(None, questions)

    def seed_questions(self, exam_id: int, questions: List[str]) -> None:
        """Store questions bound to an existing exam."""
        self._store(exam_id, questions)

    def _store(self, exam_id: Optional[int], questions: List[str]) -> None:
        from exams.infrastructure.models import QuestionModel

        try:
            with log_latency(logger, "questions_save", exam_id=exam_id, question_count=len(questions)):
                with session_scope(self._session_factory) as session:
                    session.add_all(
                        QuestionModel(exam_id=exam_id, position=position, text=text)
                        for position, text in enumerate(questions)
                    )
        except SQLAlchemyError as e:
            raise RepositoryException(f"Failed to save questions: {e}")
