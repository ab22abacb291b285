"""
Shared Kernel Module
====================

Generic infrastructure used by the exams module and the bootstrap code.

DO NOT add exam or question business logic to the shared kernel.
"""

__version__ = "1.0.0"
