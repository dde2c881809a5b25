# Sample data inserted on first start so a fresh install has something to show.

from __future__ import annotations

import logging
from typing import Tuple

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from models import Question, Team

logger = logging.getLogger(__name__)

SAMPLE_QUESTIONS = [
    {
        "text": "If you could have dinner with anyone, living or dead, who would it be and why?",
        "category": "personal",
        "difficulty": "easy",
    },
    {
        "text": "What's the most unusual talent or skill you have?",
        "category": "personal",
        "difficulty": "easy",
    },
    {
        "text": "If you could live in any time period, which would you choose and why?",
        "category": "hypothetical",
        "difficulty": "medium",
    },
    {
        "text": "What's the best piece of advice you've ever received?",
        "category": "personal",
        "difficulty": "medium",
    },
    {
        "text": "If you could instantly become an expert in any field, what would it be?",
        "category": "hypothetical",
        "difficulty": "easy",
    },
    {
        "text": "What's a goal you have that you've never told anyone about?",
        "category": "personal",
        "difficulty": "hard",
    },
    {
        "text": "If you could switch lives with someone for a day, who would it be?",
        "category": "hypothetical",
        "difficulty": "medium",
    },
    {
        "text": "What's something you believed as a child that you later found out wasn't true?",
        "category": "personal",
        "difficulty": "easy",
    },
    {
        "text": "If you could create a new holiday, what would it celebrate?",
        "category": "creative",
        "difficulty": "medium",
    },
    {
        "text": "What's the most spontaneous thing you've ever done?",
        "category": "personal",
        "difficulty": "medium",
    },
    {
        "text": "If you could have any superpower for just one day, what would it be?",
        "category": "hypothetical",
        "difficulty": "easy",
    },
    {
        "text": "What's a skill you wish everyone had to learn in school?",
        "category": "thoughtful",
        "difficulty": "medium",
    },
    {
        "text": "If you could redesign your workspace, what would it look like?",
        "category": "work",
        "difficulty": "easy",
    },
    {
        "text": "What's the most interesting documentary or book you've consumed recently?",
        "category": "personal",
        "difficulty": "medium",
    },
    {
        "text": "If you could start a business tomorrow, what would it be?",
        "category": "work",
        "difficulty": "medium",
    },
]

SAMPLE_TEAMS = [
    {"name": "Engineering Team", "color": "#3B82F6"},
    {"name": "Design Team", "color": "#EF4444"},
    {"name": "Marketing Team", "color": "#10B981"},
    {"name": "Sales Team", "color": "#F59E0B"},
]


def seed_sample_data(db: Session) -> Tuple[int, int]:
    """Fill empty question/team tables. Returns (questions_added, teams_added)."""
    questions_added = teams_added = 0

    if not db.scalar(select(func.count(Question.id))):
        db.add_all(Question(**q) for q in SAMPLE_QUESTIONS)
        questions_added = len(SAMPLE_QUESTIONS)

    if not db.scalar(select(func.count(Team.id))):
        db.add_all(Team(**t) for t in SAMPLE_TEAMS)
        teams_added = len(SAMPLE_TEAMS)

    db.commit()
    if questions_added or teams_added:
        logger.info("seeded %d sample questions, %d sample teams", questions_added, teams_added)
    return questions_added, teams_added
