"""
Exam Composer - Main Application
================================

Wires the exam service to the configured catalog backend.

Clean Architecture Layers:
- Application: ExamService and repository interfaces
- Domain: Exam entity
- Infrastructure: In-memory and SQLAlchemy catalogs, database, logging

Usage:
    python src/main.py "Aritmética"
"""

import sys
from dataclasses import replace
from typing import List, Optional

from sqlalchemy.engine import make_url

from config import CatalogBackend, Settings, settings as default_settings
from core import ConfigurationException, ExamNotFoundException
from exams.application import ExamService
from exams.infrastructure import (
    InMemoryExamRepository,
    InMemoryQuestionRepository,
    SQLAlchemyExamRepository,
    SQLAlchemyQuestionRepository
)
from exams.infrastructure.sample_data import sample_exams, sample_questions
from infrastructure.database import create_tables, get_session_factory, init_database
from shared.infrastructure.logging import get_logger, setup_logging

logger = get_logger(__name__)


def create_exam_service(settings: Optional[Settings] = None) -> ExamService:
    """
    Build an ExamService over the configured catalog backend.

    Args:
        settings: Settings to use, the global settings when omitted

    Returns:
        ExamService wired to its two repositories

    Raises:
        ConfigurationException: If the backend is not supported
    """
    settings = settings or default_settings

    if settings.catalog_backend == CatalogBackend.MEMORY:
        logger.info("Using in-memory catalogs")
        return ExamService(InMemoryExamRepository(), InMemoryQuestionRepository())

    if settings.catalog_backend == CatalogBackend.DATABASE:
        logger.info("Using database catalogs", extra={
            "database_url": make_url(settings.database_url).render_as_string(hide_password=True)
        })
        init_database(
            settings.database_url,
            echo=settings.db_echo,
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
        )
        create_tables()

        session_factory = get_session_factory()
        exam_repository = SQLAlchemyExamRepository(session_factory)
        question_repository = SQLAlchemyQuestionRepository(session_factory)

        if settings.seed_sample_data and not exam_repository.find_all():
            _seed_database(exam_repository, question_repository)

        return ExamService(exam_repository, question_repository)

    raise ConfigurationException(f"Unsupported catalog backend: {settings.catalog_backend}")


def _seed_database(
    exam_repository: SQLAlchemyExamRepository,
    question_repository: SQLAlchemyQuestionRepository
) -> None:
    """
    Load the sample exams, each with the sample question bank.

    Exams are inserted without ids so the database assigns them.
    """
    logger.info("Seeding database with sample catalog")
    for exam in sample_exams():
        saved = exam_repository.save(replace(exam, id=None))
        question_repository.seed_questions(saved.id, sample_questions())


def main(argv: Optional[List[str]] = None) -> int:
    """
    Look up an exam by name and log it with its questions.

    Returns:
        Process exit code: 0 found, 1 not found, 2 usage error
    """
    args = sys.argv[1:] if argv is None else argv

    setup_logging(level=default_settings.log_level, environment=default_settings.environment)
    logger.info("Starting Exam Composer", extra={
        "version": default_settings.app_version,
        "environment": default_settings.environment
    })

    if len(args) != 1:
        logger.error("Expected exactly one exam name argument", extra={"arg_count": len(args)})
        return 2

    service = create_exam_service()

    try:
        exam = service.find_exam_by_name_with_questions(args[0])
    except ExamNotFoundException as e:
        logger.warning(e.message, extra={"exam_name": e.name})
        return 1

    logger.info("Exam found", extra={
        "exam_id": exam.id,
        "exam_name": exam.name,
        "questions": exam.questions
    })
    return 0


# === Development Entry Point ===

if __name__ == "__main__":
    sys.exit(main())
