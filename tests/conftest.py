"""Root conftest: shared fixtures and catalog test data."""

import os
from typing import List
from unittest.mock import Mock

import pytest

# Settings are read at import time; keep tests off any local .env values
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("CATALOG_BACKEND", "memory")

from exams.application import ExamService, IExamRepository, IQuestionRepository  # noqa: E402
from exams.domain import Exam  # noqa: E402


def build_exams() -> List[Exam]:
    return [
        Exam(1, "Aritmética"),
        Exam(2, "Geometría"),
        Exam(3, "Álgebra"),
        Exam(4, "Trigonometría"),
        Exam(5, "Programación"),
        Exam(6, "Bases de Datos"),
        Exam(7, "Estructura de datos"),
        Exam(8, "Java 17"),
    ]


def build_questions() -> List[str]:
    return [f"Pregunta {n}" for n in range(1, 11)]


@pytest.fixture
def exams() -> List[Exam]:
    return build_exams()


@pytest.fixture
def exams_negative_ids() -> List[Exam]:
    return [Exam(-1, "Aritmética"), Exam(-2, "Geometría"), Exam(-3, "Álgebra")]


@pytest.fixture
def exams_without_ids() -> List[Exam]:
    return [Exam(None, "Aritmética"), Exam(None, "Geometría"), Exam(None, "Álgebra")]


@pytest.fixture
def questions() -> List[str]:
    return build_questions()


@pytest.fixture
def docker_exam() -> Exam:
    return Exam(9, "Docker")


@pytest.fixture
def kubernetes_exam() -> Exam:
    return Exam(None, "Kubernetes")


@pytest.fixture
def exam_repository() -> Mock:
    return Mock(spec=IExamRepository)


@pytest.fixture
def question_repository() -> Mock:
    return Mock(spec=IQuestionRepository)


@pytest.fixture
def exam_service(exam_repository, question_repository) -> ExamService:
    return ExamService(exam_repository, question_repository)
