"""
Skills Matching Service

PURPOSE:
Compare a student's skills with the skills a job asks for.

Matching is exact on lower-cased names: "python" matches "Python", but
"Java" does NOT match "JavaScript".
"""

from typing import Dict, Iterable, List, Optional, Tuple

from loguru import logger

from coursepath.schemas.schemas import SkillsMatch
from coursepath.utils.rounding import round_half_up


SKILL_CATEGORIES: Dict[str, List[str]] = {
    "programming": [
        "JavaScript", "TypeScript", "Python", "Java", "C++", "C#", "Go", "Rust",
        "React", "Angular", "Vue.js", "Node.js", "Django", "Flask", "Spring Boot"
    ],
    "data_science": [
        "Python", "R", "SQL", "Machine Learning", "Deep Learning", "TensorFlow",
        "PyTorch", "Pandas", "NumPy", "Scikit-learn", "Jupyter", "Tableau"
    ],
    "cloud": [
        "AWS", "Azure", "Google Cloud", "Docker", "Kubernetes", "Terraform",
        "Jenkins", "CI/CD", "DevOps", "Linux", "Bash"
    ],
    "soft_skills": [
        "Communication", "Leadership", "Problem Solving", "Critical Thinking",
        "Project Management", "Teamwork", "Time Management", "Presentation"
    ],
}

# (keyword in course title, skill) pairs checked for computer science courses
COURSE_TITLE_SKILLS: List[Tuple[str, str]] = [
    ("Java", "Java"),
    ("Python", "Python"),
    ("Algorithm", "Algorithms"),
    ("Data Structure", "Data Structures"),
]


def calculate_skills_match(user_skills: Iterable[str], job_skills: Iterable[str]) -> SkillsMatch:
    """
    Calculate skills match between a user and a job.

    Args:
        user_skills: Skills the user has
        job_skills: Skills the job requires

    Returns:
        SkillsMatch with matched/missing required skills (original casing and
        order) and the rounded percentage of required skills matched.
        0% when the job lists no skills.
    """
    user_skills_lower = {skill.lower() for skill in user_skills}
    job_skills = list(job_skills)

    matched_skills = [skill for skill in job_skills if skill.lower() in user_skills_lower]
    missing_skills = [skill for skill in job_skills if skill.lower() not in user_skills_lower]

    if not job_skills:
        logger.debug("Job lists no skills, match percentage is 0")
        match_percentage = 0
    else:
        match_percentage = round_half_up(len(matched_skills) / len(job_skills) * 100)

    return SkillsMatch(
        matched_skills=matched_skills,
        missing_skills=missing_skills,
        match_percentage=match_percentage
    )


def derive_skills_from_courses(courses: Iterable[Tuple[str, str]]) -> List[str]:
    """
    Derive skills from completed courses.

    Only computer science courses (code contains "CS") count: each gives
    "Programming", plus a language or topic skill when the title mentions one.

    Args:
        courses: (course code, course title) pairs

    Returns:
        Unique skills in the order they were first found
    """
    skills: List[str] = []

    def add(skill: str):
        if skill not in skills:
            skills.append(skill)

    for code, title in courses:
        if "CS" not in code:
            continue
        add("Programming")
        for keyword, skill in COURSE_TITLE_SKILLS:
            if keyword in title:
                add(skill)

    return skills


def categorize_skill(skill: str) -> Optional[str]:
    """Return the first category listing the skill (case-insensitive), or None."""
    skill_lower = skill.lower()
    for category, names in SKILL_CATEGORIES.items():
        if any(name.lower() == skill_lower for name in names):
            return category
    return None
