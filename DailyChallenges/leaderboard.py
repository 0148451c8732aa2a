from datetime import timedelta
from typing import Dict, Iterable, List, Tuple

from django.utils import timezone

from DailyChallenges.constants import ACTIVE_USER_WINDOW_MINUTES, LEADERBOARD_LIMIT
from DailyChallenges.models import Score, Submission
from Onboarding.models import Profile


def rank_totals(rows: Iterable[Tuple[int, float]]) -> List[Dict]:
    """
    Sum (user_id, total_score) rows per user and rank by descending total.
    Ties keep the order in which the user first appears in `rows`.
    """
    totals: Dict[int, float] = {}
    for user_id, total_score in rows:
        totals[user_id] = totals.get(user_id, 0) + (total_score or 0)

    ordered = sorted(totals.items(), key=lambda t: t[1], reverse=True)
    return [
        {"user_id": user_id, "total_score": total, "rank": index}
        for index, (user_id, total) in enumerate(ordered, start=1)
    ]


def _score_rows():
    return Score.objects.order_by("id").values_list("user_id", "total_score")


def build_leaderboard(limit: int = LEADERBOARD_LIMIT) -> List[Dict]:
    ranked = rank_totals(_score_rows())[:limit]
    names = dict(
        Profile.objects.filter(user_id__in=[r["user_id"] for r in ranked]).values_list("user_id", "name")
    )
    return [
        {
            "name": names.get(r["user_id"]) or "Unknown User",
            "total_score": r["total_score"],
            "rank": r["rank"],
        }
        for r in ranked
    ]


def user_stats(user) -> Dict:
    ranked = rank_totals(_score_rows())
    entry = next((r for r in ranked if r["user_id"] == user.id), None)
    return {
        "solved_challenges": Submission.objects.filter(user=user).count(),
        "total_score": entry["total_score"] if entry else 0,
        "current_rank": entry["rank"] if entry else 0,
    }


def network_status() -> Dict:
    since = timezone.now() - timedelta(minutes=ACTIVE_USER_WINDOW_MINUTES)
    return {
        "total_users": Profile.objects.count(),
        "active_users": Profile.objects.filter(updated_at__gte=since).count(),
    }
