"""SQLAlchemy catalogs over an in-memory SQLite database.

Invariants:
    - Exams come back ordered by id, with no questions attached
    - New exams get an id; known ids are updated in place
    - Each repository call commits on its own, so a failed question save
      leaves a previously saved exam in place
"""

import pytest

from core import RepositoryException, ValidationException
from exams.application import ExamService
from exams.domain import Exam
from exams.infrastructure import QuestionModel, SQLAlchemyExamRepository, SQLAlchemyQuestionRepository
from infrastructure.database import (
    close_database,
    create_tables,
    get_engine,
    get_session_factory,
    init_database,
)


@pytest.fixture
def session_factory():
    init_database("sqlite+pysqlite:///:memory:")
    create_tables()
    yield get_session_factory()
    close_database()


@pytest.fixture
def exam_repo(session_factory):
    return SQLAlchemyExamRepository(session_factory)


@pytest.fixture
def question_repo(session_factory):
    return SQLAlchemyQuestionRepository(session_factory)


def test_empty_catalog(exam_repo):
    assert exam_repo.find_all() == []


def test_save_new_exam_assigns_id(exam_repo):
    saved = exam_repo.save(Exam(None, "Kubernetes", ["Q1", "Q2"]))

    assert saved.id == 1
    assert saved.questions == ["Q1", "Q2"]
    assert exam_repo.find_all() == [Exam(1, "Kubernetes")]


def test_save_keeps_explicit_id(exam_repo):
    exam_repo.save(Exam(9, "Docker"))

    assert exam_repo.find_all() == [Exam(9, "Docker")]


def test_save_updates_existing_exam(exam_repo):
    exam_repo.save(Exam(None, "Docker"))

    exam_repo.save(Exam(1, "Docker Compose"))

    assert exam_repo.find_all() == [Exam(1, "Docker Compose")]


def test_find_all_orders_by_id(exam_repo):
    exam_repo.save(Exam(5, "Programación"))
    exam_repo.save(Exam(1, "Aritmética"))

    assert [exam.id for exam in exam_repo.find_all()] == [1, 5]


def test_questions_by_exam_id_in_position_order(exam_repo, question_repo):
    exam = exam_repo.save(Exam(None, "Álgebra"))
    question_repo.seed_questions(exam.id, ["Pregunta 1", "Pregunta 2", "Pregunta 3"])

    assert question_repo.find_questions_by_exam_id(exam.id) == ["Pregunta 1", "Pregunta 2", "Pregunta 3"]
    assert question_repo.find_questions_by_exam_id(exam.id + 1) == []


def test_questions_lookup_rejects_missing_id(question_repo):
    with pytest.raises(ValidationException):
        question_repo.find_questions_by_exam_id(None)


def test_saved_questions_are_not_bound_to_an_exam(exam_repo, question_repo):
    exam = exam_repo.save(Exam(None, "Docker"))

    question_repo.save_questions(["Q1", "Q2"])

    assert question_repo.find_questions_by_exam_id(exam.id) == []


def test_service_round_trip(exam_repo, question_repo):
    service = ExamService(exam_repo, question_repo)
    exam = service.save_exam(Exam(None, "Programación"))
    question_repo.seed_questions(exam.id, [f"Pregunta {n}" for n in range(1, 11)])

    composed = service.find_exam_by_name_with_questions("Programación")

    assert composed.id == exam.id
    assert len(composed.questions) == 10
    assert composed.questions[-1] == "Pregunta 10"


def test_exam_stays_saved_when_question_save_fails(exam_repo, question_repo):
    service = ExamService(exam_repo, question_repo)
    QuestionModel.__table__.drop(get_engine())

    with pytest.raises(RepositoryException, match="Failed to save questions"):
        service.save_exam(Exam(None, "Kubernetes", ["Q1", "Q2"]))

    assert exam_repo.find_all() == [Exam(1, "Kubernetes")]


def test_database_errors_become_repository_exceptions(session_factory):
    init_database("sqlite+pysqlite:///:memory:")  # fresh database without tables
    repository = SQLAlchemyExamRepository(get_session_factory())

    with pytest.raises(RepositoryException, match="Failed to list exams"):
        repository.find_all()
