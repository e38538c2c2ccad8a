"""
Static sample data for seeding an empty store.

Generation is deterministic for a given random seed so every fresh install
starts from the same jobs board.
"""

import random
from dataclasses import dataclass, field
from typing import List, Optional

from recruiter_ai.core.config import settings
from recruiter_ai.factories import (
    create_assessment,
    create_candidate,
    create_job,
    create_question,
    create_section,
)
from recruiter_ai.schemas.assessment import AssessmentCreate, Question
from recruiter_ai.schemas.candidate import CANDIDATE_STAGES, CandidateCreate
from recruiter_ai.schemas.job import JobCreate
from recruiter_ai.utils.slug import slugify


JOB_TITLES = [
    "Senior Frontend Developer",
    "Backend Engineer",
    "Full Stack Developer",
    "DevOps Engineer",
    "Data Scientist",
    "Machine Learning Engineer",
    "Product Manager",
    "UX Designer",
    "UI Designer",
    "QA Engineer",
    "Mobile Developer",
    "Site Reliability Engineer",
    "Security Engineer",
    "Data Engineer",
    "Technical Writer",
    "Engineering Manager",
    "Solutions Architect",
    "Cloud Engineer",
    "Database Administrator",
    "Support Engineer",
    "Sales Engineer",
    "Marketing Analyst",
    "Business Analyst",
    "Scrum Master",
    "Platform Engineer",
]

DEPARTMENTS = ["Engineering", "Product", "Design", "Data", "Operations", "Sales", "Marketing"]

LOCATIONS = ["Remote", "New York, NY", "San Francisco, CA", "Austin, TX", "London, UK", "Berlin, DE", "Bangalore, IN"]

JOB_TYPES = ["full-time", "part-time", "contract", "internship"]

TAGS = ["react", "python", "typescript", "aws", "kubernetes", "sql", "go", "figma", "ml", "remote", "senior", "junior"]

REQUIREMENTS = [
    "3+ years of professional experience",
    "Strong communication skills",
    "Experience with modern web frameworks",
    "Familiarity with cloud platforms",
    "Comfortable with code review and pairing",
    "Degree in a related field or equivalent experience",
]

BENEFITS = [
    "Health insurance",
    "Flexible working hours",
    "Learning budget",
    "Home office stipend",
    "Stock options",
    "Paid parental leave",
]

FIRST_NAMES = [
    "Aarav", "Maya", "Liam", "Sofia", "Noah", "Zara", "Ethan", "Priya", "Lucas", "Amara",
    "Mateo", "Chloe", "Kenji", "Fatima", "Oliver", "Ines", "Ravi", "Hannah", "Diego", "Leila",
]

LAST_NAMES = [
    "Sharma", "Johnson", "Garcia", "Chen", "Okafor", "Müller", "Silva", "Kim", "Patel", "Nguyen",
    "Rossi", "Haddad", "Smith", "Tanaka", "Kowalski", "Dubois", "Ahmed", "Larsen", "Costa", "Brown",
]


@dataclass
class SeedData:
    jobs: List[JobCreate] = field(default_factory=list)
    candidates: List[CandidateCreate] = field(default_factory=list)
    assessments: List[AssessmentCreate] = field(default_factory=list)


def _sample_questions(rng: random.Random, title: str) -> List[Question]:
    """One question of every type, plus a few extra text ones."""
    questions = [
        create_question(
            type="single_choice",
            title=f"How many years have you worked as a {title}?",
            required=True,
            options=["Less than 1", "1-3", "3-5", "5+"],
        ),
        create_question(
            type="multi_choice",
            title="Which of these tools have you used in production?",
            options=["Git", "Docker", "Kubernetes", "Terraform", "CI pipelines"],
        ),
        create_question(
            type="short_text",
            title="What is your preferred programming language?",
            required=True,
            validation={"max_length": 50},
        ),
        create_question(
            type="long_text",
            title="Describe a project you are proud of.",
            required=True,
            validation={"min_length": 50, "max_length": 2000},
        ),
        create_question(
            type="numeric",
            title="What are your salary expectations (in thousands)?",
            validation={"min_value": 0, "max_value": 1000},
        ),
        create_question(
            type="file_upload",
            title="Upload a code sample or portfolio.",
        ),
    ]
    for index in range(rng.randint(4, 8)):
        questions.append(
            create_question(
                type=rng.choice(["short_text", "long_text"]),
                title=f"Follow-up question {index + 1}",
            )
        )
    for order, question in enumerate(questions):
        question.order = order
    return questions


def generate_seed_data(
    job_count: Optional[int] = None,
    candidate_count: Optional[int] = None,
    assessment_count: Optional[int] = None,
    random_seed: Optional[int] = None,
) -> SeedData:
    """Build jobs, candidates and assessments for a fresh store."""
    rng = random.Random(settings.SEED_RANDOM_SEED if random_seed is None else random_seed)
    job_count = settings.SEED_JOB_COUNT if job_count is None else job_count
    candidate_count = settings.SEED_CANDIDATE_COUNT if candidate_count is None else candidate_count
    assessment_count = settings.SEED_ASSESSMENT_COUNT if assessment_count is None else assessment_count

    data = SeedData()

    for index in range(job_count):
        title = JOB_TITLES[index % len(JOB_TITLES)]
        if index >= len(JOB_TITLES):
            title = f"{title} {index // len(JOB_TITLES) + 1}"
        data.jobs.append(
            create_job(
                title=title,
                slug=slugify(title),
                status="active" if rng.random() < 0.8 else "archived",
                tags=rng.sample(TAGS, k=rng.randint(1, 4)),
                order=index,
                description=f"We are hiring a {title} to join our team.",
                requirements=rng.sample(REQUIREMENTS, k=3),
                benefits=rng.sample(BENEFITS, k=3),
                location=rng.choice(LOCATIONS),
                salary=f"${rng.randrange(60, 200, 10)}k - ${rng.randrange(200, 300, 10)}k",
                type=rng.choice(JOB_TYPES),
                department=rng.choice(DEPARTMENTS),
            )
        )

    for index in range(candidate_count):
        first = rng.choice(FIRST_NAMES)
        last = rng.choice(LAST_NAMES)
        job = rng.choice(data.jobs) if data.jobs else None
        data.candidates.append(
            create_candidate(
                name=f"{first} {last}",
                email=f"{slugify(first)}.{slugify(last)}{index}@example.com",
                phone=f"+1-555-{rng.randint(100, 999)}-{rng.randint(1000, 9999)}",
                stage=rng.choice(CANDIDATE_STAGES),
                job_id=job.id if job else None,
            )
        )

    for job in data.jobs[:assessment_count]:
        questions = _sample_questions(rng, job.title)
        midpoint = len(questions) // 2
        data.assessments.append(
            create_assessment(
                job_id=job.id,
                title=f"{job.title} Assessment",
                description=f"Screening assessment for the {job.title} role.",
                sections=[
                    create_section(title="Background", questions=questions[:midpoint], order=0),
                    create_section(title="Skills", questions=questions[midpoint:], order=1),
                ],
                settings={"time_limit": 60, "allow_multiple_attempts": False, "show_results": False},
                status="active",
            )
        )

    return data
