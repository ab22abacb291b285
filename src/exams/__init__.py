"""
Exams Module
============

Bounded context for composing exams with their questions.

Responsibilities:
- Look up an exam by name in the exam catalog
- Attach the questions held by the question catalog
- Save an exam and then, when it has any, its questions
"""

__version__ = "1.0.0"
