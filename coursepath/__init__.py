"""
CoursePath - Academic Planning Core
Shared business logic for course planning and career matching.

Architecture:
- services: GPA, degree progress, prerequisite ordering, skills matching, job listings
- schemas: Pydantic models passed in and out of the services
- core: Settings (pydantic-settings) and logging (loguru)

The web layer, database and external job/LLM APIs live outside this package
and only feed raw grades, credits, prerequisites and skills into it.
"""
from loguru import logger

__version__ = "1.0.0"
__author__ = "Student"

# Library code stays silent until the application calls setup_logger()
logger.disable("coursepath")
