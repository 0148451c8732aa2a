from __future__ import annotations
import logging
import re
from typing import Any, Dict, List, Optional, Sequence

from DailyChallenges.agents.challenge_prompts import (
    CURRICULUM,
    DEFAULT_TRACK,
    DOMAIN_PLACEHOLDER,
    FALLBACK_TEMPLATES,
    PROBLEM_GEN_PROMPT,
    PROBLEM_GEN_SYSTEM,
    TRACK_KEYWORDS,
)
from DailyChallenges.constants import BATCH_SIZE, DEFAULT_SKILL
from DailyChallenges.utils import generate_response_with_groq

_PLACEHOLDER_RE = re.compile(
    r"<(day_number|stage|primary_skill|skills|problem_statement|previous_problems)>"
)
_REPLY_RE = re.compile(
    r"^\s*\**\s*Title\s*\**\s*:\s*(?P<title>.+?)\s*$"
    r".*?"
    r"^\s*\**\s*Description\s*\**\s*:\s*(?P<description>.*)\Z",
    re.IGNORECASE | re.MULTILINE | re.DOTALL,
)


class GenerationParseError(ValueError):
    pass


def primary_skill(skills: Optional[Sequence[str]]) -> str:
    for s in skills or []:
        if s and s.strip():
            return s.strip()
    return DEFAULT_SKILL


def _has_keyword(skill: str, keyword: str) -> bool:
    # two-letter keywords (ml, ai, ui, ux) must stand alone so "email" is not "ai"
    if len(keyword) <= 2:
        return re.search(rf"(?<![a-z]){keyword}(?![a-z])", skill) is not None
    return keyword in skill


def select_track(skill: str) -> str:
    lowered = (skill or "").lower()
    for track, keywords in TRACK_KEYWORDS:
        if any(_has_keyword(lowered, k) for k in keywords):
            return track
    return DEFAULT_TRACK


def curriculum_stage(day_number: int) -> int:
    """Index into the five-stage outline; days past the first batch wrap around."""
    return (max(day_number, 1) - 1) % BATCH_SIZE


def _round_number(day_number: int) -> int:
    return (max(day_number, 1) - 1) // BATCH_SIZE + 1


def parse_generated_problem(text: Optional[str]) -> Dict[str, str]:
    """
    Parse a `Title: ... / Description: ...` reply.
    Raises GenerationParseError if either part is missing or empty.
    """
    if not text or not text.strip():
        raise GenerationParseError("Empty generation reply")

    match = _REPLY_RE.search(text.strip())
    if not match:
        raise GenerationParseError("Reply does not follow the Title/Description convention")

    title = match.group("title").strip().strip("*").strip()
    description = match.group("description").strip().lstrip("*").strip()
    if not title or not description:
        raise GenerationParseError("Title or description is empty")
    return {"problem_title": title[:255], "problem_description": description}


def fallback_problem(skills: Optional[Sequence[str]], problem_statement: str, day_number: int) -> Dict[str, str]:
    skill = primary_skill(skills)
    track = select_track(skill)
    title, description = FALLBACK_TEMPLATES[track][curriculum_stage(day_number)]

    domain = (problem_statement or "").strip()
    title = title.format(skill=skill)
    description = description.format(skill=skill)
    if domain:
        description = description.replace(DOMAIN_PLACEHOLDER, f'"{domain}"')

    round_number = _round_number(day_number)
    if round_number > 1:
        title = f"{title} (Advanced Round {round_number})"
        description = (
            f"{description}\n\nThis is an advanced round: raise the bar on scale, "
            f"code quality and presentation compared to day {day_number - BATCH_SIZE}."
        )
    return {"problem_title": title, "problem_description": description}


def _build_messages(skills: Sequence[str], problem_statement: str,
                    existing_problems: List[Dict[str, Any]], day_number: int) -> List[Dict[str, str]]:
    skill = primary_skill(skills)
    track = select_track(skill)
    stage = CURRICULUM[track][curriculum_stage(day_number)]
    previous = "\n".join(
        f"- Day {i}: {p.get('problem_title', '')}" for i, p in enumerate(existing_problems, start=1)
    ) or "(none yet)"

    values = {
        "day_number": str(day_number),
        "stage": stage,
        "primary_skill": skill,
        "skills": ", ".join(skills) if skills else DEFAULT_SKILL,
        "problem_statement": problem_statement or "(not chosen yet)",
        "previous_problems": previous,
    }
    # One pass, so placeholders inside user text are left alone.
    prompt = _PLACEHOLDER_RE.sub(lambda m: values[m.group(1)], PROBLEM_GEN_PROMPT)
    return [
        {"role": "system", "content": PROBLEM_GEN_SYSTEM},
        {"role": "user", "content": prompt},
    ]


def generate_problem_statement(
    skills: Optional[Sequence[str]],
    problem_statement: str,
    existing_problems: Optional[List[Dict[str, Any]]] = None,
    day_number: int = 1,
) -> Dict[str, str]:
    """
    Produce {"problem_title", "problem_description"} for the given day.
    Never throws: a failed call or an unparseable reply falls back to the static templates.
    """
    skills = [s.strip() for s in (skills or []) if s and s.strip()]
    existing_problems = existing_problems or []

    messages = _build_messages(skills, problem_statement, existing_problems, day_number)
    content, _usage = generate_response_with_groq(messages, temperature=0.7)
    if content is None:
        logging.warning("Generation call failed for day %s; using fallback template", day_number)
        return fallback_problem(skills, problem_statement, day_number)

    try:
        return parse_generated_problem(content)
    except GenerationParseError as e:
        logging.warning("Could not parse generated problem for day %s (%s); using fallback template", day_number, e)
        return fallback_problem(skills, problem_statement, day_number)
