"""
Sample Catalog Data
===================

Fixed exams and questions the in-memory catalogs start from.
"""

from typing import List

from exams.domain import Exam

_EXAMS = (
    (1, "Aritmética"),
    (2, "Geometría"),
    (3, "Álgebra"),
    (4, "Trigonometría"),
    (5, "Programación"),
    (6, "Bases de Datos"),
    (7, "Estructura de datos"),
    (8, "Java 17"),
)

QUESTIONS = (
    "Pregunta 1 (real)",
    "Pregunta 2 (real)",
    "Pregunta 3 (real)",
    "Pregunta 4 (real)",
    "Pregunta 5 (real)",
)


def sample_exams() -> List[Exam]:
    """Fresh Exam instances for the sample catalog."""
    return [Exam(id=exam_id, name=name) for exam_id, name in _EXAMS]


def sample_questions() -> List[str]:
    return list(QUESTIONS)
