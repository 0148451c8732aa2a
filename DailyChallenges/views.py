import logging
from typing import Any, Dict

from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.parsers import MultiPartParser, FormParser, JSONParser

from Onboarding.models import Profile
from Onboarding.serializers import ProfileSerializer
from .constants import BATCH_SIZE
from .leaderboard import build_leaderboard, network_status, user_stats
from .models import DayProblem, Score
from .progression import can_generate_next_batch, next_day_number, submitted_problem_ids, sync_active_problem
from .serializers import DayProblemSerializer, SubmissionSerializer, SubmissionUploadSerializer
from .services import SubmissionError, generate_problem_batch, submit_solution
from .utils import create_response


def challenge_context(user) -> Dict[str, Any]:
    return {
        "submitted_ids": submitted_problem_ids(user),
        "scores": {s.day_problem_id: s for s in Score.objects.filter(user=user)},
    }


def load_challenges(user):
    """Recompute the active challenge, then return the user's problems with their status."""
    sync_active_problem(user)
    problems = list(DayProblem.objects.filter(user=user).order_by("day_number"))
    context = challenge_context(user)
    return problems, context


class DayProblemViewSet(viewsets.ReadOnlyModelViewSet):
    serializer_class = DayProblemSerializer
    parser_classes = (MultiPartParser, FormParser, JSONParser)

    def get_queryset(self):
        return DayProblem.objects.filter(user=self.request.user).order_by("day_number")

    def get_serializer_context(self):
        context = super().get_serializer_context()
        context.update(challenge_context(self.request.user))
        return context

    def list(self, request, *args, **kwargs):
        problems, context = load_challenges(request.user)
        return create_response(True, "Challenges", DayProblemSerializer(problems, many=True, context=context).data)

    @action(detail=True, methods=["post"], parser_classes=[MultiPartParser, FormParser])
    def submit(self, request, pk=None):
        day_problem = self.get_object()
        upload = SubmissionUploadSerializer(data=request.data)
        if not upload.is_valid():
            return create_response(False, "Submission rejected", upload.errors, status_code=status.HTTP_400_BAD_REQUEST)

        try:
            submission = submit_solution(
                request.user,
                day_problem,
                upload.validated_data["code_file"],
                upload.validated_data["video_file"],
            )
        except SubmissionError as e:
            return create_response(False, str(e), status_code=e.status_code)
        except Exception as e:
            logging.exception("Submission failed")
            return create_response(False, str(e), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

        sync_active_problem(request.user)
        return create_response(
            True,
            "Submission successful! You will receive your result by 11:59 PM IST tonight",
            SubmissionSerializer(submission).data,
            status_code=status.HTTP_201_CREATED,
        )

    @action(detail=False, methods=["get"])
    def can_generate_next(self, request):
        problems = list(self.get_queryset())
        eligible = can_generate_next_batch(problems, submitted_problem_ids(request.user))
        return create_response(True, "Generation eligibility", {"can_generate_next": eligible})

    @action(detail=False, methods=["post"], parser_classes=[JSONParser])
    def generate_next(self, request):
        problems = list(self.get_queryset())
        if not can_generate_next_batch(problems, submitted_problem_ids(request.user)):
            return create_response(
                False,
                "Submit every current challenge before generating the next batch",
                status_code=status.HTTP_400_BAD_REQUEST,
            )

        profile = Profile.objects.filter(user=request.user).first()
        if not profile:
            return create_response(False, "Profile not found", status_code=status.HTTP_404_NOT_FOUND)

        try:
            result = generate_problem_batch(
                request.user,
                profile.skills,
                profile.problem_statement or "",
                start_day=next_day_number(problems),
                count=BATCH_SIZE,
            )
            problems, context = load_challenges(request.user)
            body = {
                "challenges": DayProblemSerializer(problems, many=True, context=context).data,
                "created": len(result["created"]),
                "failed_days": result["failed_days"],
            }
            if not result["created"]:
                return create_response(
                    False,
                    "No challenges could be generated. Please try again.",
                    body,
                    status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                )
            return create_response(True, "Next batch generated", body, status_code=status.HTTP_201_CREATED)

        except Exception as e:
            logging.exception("Generating next batch failed")
            return create_response(False, str(e), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


class DashboardViewSet(viewsets.ViewSet):

    def list(self, request):
        problems, context = load_challenges(request.user)
        profile = Profile.objects.filter(user=request.user).first()
        body = {
            "profile": ProfileSerializer(profile).data if profile else None,
            "challenges": DayProblemSerializer(problems, many=True, context=context).data,
            "leaderboard": build_leaderboard(),
            "stats": user_stats(request.user),
            "network_status": network_status(),
            "can_generate_next": can_generate_next_batch(problems, context["submitted_ids"]),
        }
        return create_response(True, "Dashboard", body)

    @action(detail=False, methods=["get"])
    def leaderboard(self, request):
        return create_response(True, "Leaderboard", build_leaderboard())

    @action(detail=False, methods=["get"])
    def stats(self, request):
        return create_response(True, "User stats", user_stats(request.user))

    @action(detail=False, methods=["get"])
    def network_status(self, request):
        return create_response(True, "Network status", network_status())
