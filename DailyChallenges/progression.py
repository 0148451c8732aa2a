from typing import Iterable, Optional, Sequence, Set

from django.db import transaction

from DailyChallenges.models import DayProblem, Submission


def find_active_problem(problems: Sequence, submitted_ids: Set) -> Optional[object]:
    """
    Return the first problem (by day_number) without a submission, or the last
    problem when every one of them is submitted. `problems` must already be
    ordered by day_number.
    """
    if not problems:
        return None
    for problem in problems:
        if problem.id not in submitted_ids:
            return problem
    return problems[-1]


def can_generate_next_batch(problems: Sequence, submitted_ids: Set) -> bool:
    return bool(problems) and all(p.id in submitted_ids for p in problems)


def submitted_problem_ids(user) -> Set[int]:
    return set(Submission.objects.filter(user=user).values_list("day_problem_id", flat=True))


def sync_active_problem(user) -> Optional[DayProblem]:
    """
    Recompute and persist the single active DayProblem for `user`.

    The user's rows are locked for the duration of the transaction, so two
    concurrent loads serialize instead of interleaving their writes.
    """
    with transaction.atomic():
        problems = list(
            DayProblem.objects.select_for_update().filter(user=user).order_by("day_number")
        )
        active = find_active_problem(problems, submitted_problem_ids(user))
        if active is None:
            return None

        DayProblem.objects.filter(user=user, is_active=True).exclude(id=active.id).update(is_active=False)
        if not active.is_active:
            DayProblem.objects.filter(id=active.id).update(is_active=True)
            active.is_active = True
    return active


def next_day_number(problems: Iterable) -> int:
    return max((p.day_number for p in problems), default=0) + 1
