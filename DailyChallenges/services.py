import logging
import time
from datetime import timedelta
from typing import Any, Dict, List

from django.core.files.storage import FileSystemStorage
from django.conf import settings
from django.db import DatabaseError, IntegrityError, transaction
from django.utils import timezone
from django.utils.text import get_valid_filename

from DailyChallenges.agents.challenge_agent import generate_problem_statement
from DailyChallenges.constants import BATCH_SIZE, CODE_BUCKET, VIDEO_BUCKET
from DailyChallenges.models import DayProblem, Submission
from DailyChallenges.progression import sync_active_problem


class SubmissionError(Exception):
    status_code = 400


class ProblemNotFound(SubmissionError):
    status_code = 404


class AlreadySubmitted(SubmissionError):
    status_code = 409


class ChallengeNotOpen(SubmissionError):
    status_code = 409


def bucket_storage(bucket: str) -> FileSystemStorage:
    return FileSystemStorage(
        location=f"{settings.MEDIA_ROOT}/{bucket}",
        base_url=f"{settings.MEDIA_URL}{bucket}/",
    )


def _store(bucket: str, path: str, upload) -> str:
    storage = bucket_storage(bucket)
    return storage.save(path, upload)


def _discard(bucket: str, name: str):
    try:
        bucket_storage(bucket).delete(name)
    except OSError as e:
        logging.error(f"[submit_solution] Could not remove orphaned upload {bucket}/{name}: {e}")


def submit_solution(user, day_problem: DayProblem, code_file, video_file) -> Submission:
    """
    Store the code archive and the video, then record the Submission.
    Only the user's active challenge accepts a submission.

    Files land at <user_id>/<problem_id>/code_<ts>_<name> and
    <user_id>/<problem_id>/video_<ts>_<name> in their buckets. If the row
    cannot be written both stored files are removed again.
    """
    if day_problem.user_id != user.id:
        raise ProblemNotFound("Challenge not found")
    if Submission.objects.filter(user=user, day_problem=day_problem).exists():
        raise AlreadySubmitted("This challenge has already been submitted")
    active = sync_active_problem(user)
    if active is None or active.id != day_problem.id:
        raise ChallengeNotOpen("Only today's active challenge is open for submission")

    ts = int(time.time() * 1000)
    prefix = f"{user.id}/{day_problem.id}"
    code_name = _store(CODE_BUCKET, f"{prefix}/code_{ts}_{get_valid_filename(code_file.name)}", code_file)
    video_name = None
    try:
        video_name = _store(VIDEO_BUCKET, f"{prefix}/video_{ts}_{get_valid_filename(video_file.name)}", video_file)
        with transaction.atomic():
            submission = Submission.objects.create(
                user=user,
                day_problem=day_problem,
                file_url=bucket_storage(CODE_BUCKET).url(code_name),
                video_url=bucket_storage(VIDEO_BUCKET).url(video_name),
            )
    except Exception as e:
        _discard(CODE_BUCKET, code_name)
        if video_name:
            _discard(VIDEO_BUCKET, video_name)
        if isinstance(e, IntegrityError):
            raise AlreadySubmitted("This challenge has already been submitted") from e
        raise
    return submission


def generate_problem_batch(user, skills: List[str], problem_statement: str,
                           start_day: int = 1, count: int = BATCH_SIZE) -> Dict[str, Any]:
    """
    Generate and store `count` DayProblems starting at `start_day`.

    Each problem sees the ones generated before it as context. A day whose
    insert fails is logged and skipped; the remaining days are still generated.
    """
    existing: List[Dict[str, Any]] = list(
        DayProblem.objects.filter(user=user).order_by("day_number").values("problem_title", "problem_description")
    )
    first_batch = not existing
    today = timezone.localdate()

    created: List[DayProblem] = []
    failed_days: List[int] = []
    for day_number in range(start_day, start_day + count):
        problem_data = generate_problem_statement(skills, problem_statement, existing, day_number)
        try:
            with transaction.atomic():
                problem = DayProblem.objects.create(
                    user=user,
                    day_number=day_number,
                    problem_title=problem_data["problem_title"],
                    problem_description=problem_data["problem_description"],
                    challenge_date=today + timedelta(days=day_number - 1),
                    is_active=first_batch and day_number == start_day,
                )
        except DatabaseError as e:
            logging.error(f"[generate_problem_batch] Error saving problem for day {day_number}: {e}")
            failed_days.append(day_number)
            continue

        existing.append(problem_data)
        created.append(problem)

    return {"created": created, "failed_days": failed_days}
