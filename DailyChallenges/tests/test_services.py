import os
from datetime import date, timedelta

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile
from django.db import DatabaseError
from django.utils import timezone

from DailyChallenges import services
from DailyChallenges.constants import CODE_BUCKET, VIDEO_BUCKET
from DailyChallenges.models import DayProblem, Submission
from DailyChallenges.services import (
    AlreadySubmitted,
    ChallengeNotOpen,
    ProblemNotFound,
    generate_problem_batch,
    submit_solution,
)

pytestmark = pytest.mark.django_db


def _files():
    return (
        SimpleUploadedFile("my solution.zip", b"PK\x03\x04 fake archive", content_type="application/zip"),
        SimpleUploadedFile("demo.mp4", b"\x00\x00\x00 fake video", content_type="video/mp4"),
    )


def _problem(user, day=1):
    return DayProblem.objects.create(
        user=user, day_number=day, problem_title="t", problem_description="d", challenge_date=date(2025, 9, day)
    )


def _stored_files(root):
    found = []
    for dirpath, _dirs, files in os.walk(root):
        found.extend(os.path.join(dirpath, f) for f in files)
    return found


def test_generate_first_batch(user):
    result = generate_problem_batch(user, ["Python"], "Flood alerts")

    problems = list(DayProblem.objects.filter(user=user).order_by("day_number"))
    assert [p.day_number for p in problems] == [1, 2, 3, 4, 5]
    assert result["failed_days"] == []
    assert len(result["created"]) == 5
    assert [p.is_active for p in problems] == [True, False, False, False, False]
    today = timezone.localdate()
    assert [p.challenge_date for p in problems] == [today + timedelta(days=i) for i in range(5)]


def test_generate_passes_previous_problems_as_context(user, monkeypatch):
    seen = []

    def fake_generate(skills, statement, existing, day_number):
        seen.append([p["problem_title"] for p in existing])
        return {"problem_title": f"Problem {day_number}", "problem_description": "desc"}

    monkeypatch.setattr(services, "generate_problem_statement", fake_generate)
    generate_problem_batch(user, ["Python"], "Flood alerts", count=3)

    assert seen == [[], ["Problem 1"], ["Problem 1", "Problem 2"]]


def test_generate_next_batch_continues_numbering(user):
    generate_problem_batch(user, ["Python"], "Flood alerts")
    result = generate_problem_batch(user, ["Python"], "Flood alerts", start_day=6)

    assert [p.day_number for p in result["created"]] == [6, 7, 8, 9, 10]
    assert not any(p.is_active for p in result["created"])
    assert result["created"][0].challenge_date == timezone.localdate() + timedelta(days=5)


def test_generate_skips_failed_day_and_continues(user):
    _problem(user, day=3)

    result = generate_problem_batch(user, ["Python"], "Flood alerts", start_day=1)

    assert result["failed_days"] == [3]
    assert [p.day_number for p in result["created"]] == [1, 2, 4, 5]
    assert DayProblem.objects.filter(user=user).count() == 5


def test_submit_solution_stores_files_and_row(user, settings):
    problem = _problem(user)
    code, video = _files()

    submission = submit_solution(user, problem, code, video)

    assert Submission.objects.filter(user=user, day_problem=problem).count() == 1
    assert submission.file_url.startswith(f"{settings.MEDIA_URL}{CODE_BUCKET}/{user.id}/{problem.id}/code_")
    assert submission.video_url.startswith(f"{settings.MEDIA_URL}{VIDEO_BUCKET}/{user.id}/{problem.id}/video_")
    assert submission.file_url.endswith("my_solution.zip")
    assert len(_stored_files(settings.MEDIA_ROOT)) == 2


def test_submit_solution_rejects_resubmission(user):
    problem = _problem(user)
    submit_solution(user, problem, *_files())

    with pytest.raises(AlreadySubmitted):
        submit_solution(user, problem, *_files())
    assert Submission.objects.filter(user=user).count() == 1


def test_submit_solution_rejects_foreign_problem(user, make_user):
    other = make_user(email="other@example.com")
    with pytest.raises(ProblemNotFound):
        submit_solution(user, _problem(other), *_files())


def test_submit_solution_removes_uploads_when_insert_fails(user, settings, monkeypatch):
    problem = _problem(user)

    def broken_create(**kwargs):
        raise DatabaseError("insert failed")

    monkeypatch.setattr(Submission.objects, "create", broken_create)

    with pytest.raises(DatabaseError):
        submit_solution(user, problem, *_files())
    assert _stored_files(settings.MEDIA_ROOT) == []


def test_submit_solution_only_accepts_active_problem(user, settings):
    problems = [_problem(user, day=d) for d in range(1, 6)]

    with pytest.raises(ChallengeNotOpen):
        submit_solution(user, problems[4], *_files())

    assert not Submission.objects.exists()
    assert _stored_files(settings.MEDIA_ROOT) == []
    assert DayProblem.objects.get(user=user, is_active=True).day_number == 1


def test_submit_solution_follows_active_day_in_order(user):
    first, second, third = [_problem(user, day=d) for d in range(1, 4)]
    submit_solution(user, first, *_files())

    with pytest.raises(ChallengeNotOpen):
        submit_solution(user, third, *_files())
    submit_solution(user, second, *_files())

    assert set(Submission.objects.values_list("day_problem_id", flat=True)) == {first.id, second.id}
