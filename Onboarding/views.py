import logging

from django.contrib.auth import authenticate, get_user_model
from django.db import transaction

from rest_framework import viewsets, status
from rest_framework.authtoken.models import Token
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny, IsAuthenticated

from DailyChallenges.constants import BATCH_SIZE
from DailyChallenges.models import DayProblem
from DailyChallenges.progression import sync_active_problem
from DailyChallenges.serializers import DayProblemSerializer
from DailyChallenges.services import generate_problem_batch
from DailyChallenges.utils import create_response
from .models import Profile
from .serializers import LoginSerializer, OnboardingSerializer, ProfileSerializer, RegisterSerializer


def _profile_for(user) -> Profile:
    profile, _ = Profile.objects.get_or_create(user=user)
    return profile


class AuthViewSet(viewsets.ViewSet):
    permission_classes = (AllowAny,)

    @action(detail=False, methods=["post"])
    @transaction.atomic
    def register(self, request):
        serializer = RegisterSerializer(data=request.data)
        if not serializer.is_valid():
            return create_response(False, "Sign up failed", serializer.errors, status_code=status.HTTP_400_BAD_REQUEST)

        email = serializer.validated_data["email"].strip().lower()
        if get_user_model().objects.filter(username=email).exists():
            return create_response(
                False,
                "Account already exists. Please log in with your existing account.",
                status_code=status.HTTP_409_CONFLICT,
            )

        try:
            user = serializer.save()
            token, _ = Token.objects.get_or_create(user=user)
            return create_response(
                True,
                "Account created",
                {"token": token.key, "profile": ProfileSerializer(user.profile).data},
                status_code=status.HTTP_201_CREATED,
            )
        except Exception as e:
            transaction.set_rollback(True)
            logging.exception("Registration failed")
            return create_response(False, str(e), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    @action(detail=False, methods=["post"])
    def login(self, request):
        serializer = LoginSerializer(data=request.data)
        if not serializer.is_valid():
            return create_response(False, "Login failed", serializer.errors, status_code=status.HTTP_400_BAD_REQUEST)

        email = serializer.validated_data["email"].strip().lower()
        user = authenticate(request, username=email, password=serializer.validated_data["password"])
        if user is None:
            return create_response(False, "Invalid login credentials", status_code=status.HTTP_401_UNAUTHORIZED)

        token, _ = Token.objects.get_or_create(user=user)
        profile = _profile_for(user)
        # refreshes updated_at, which drives the active-user count
        profile.save(update_fields=["updated_at"])
        return create_response(
            True,
            "Logged in",
            {"token": token.key, "profile": ProfileSerializer(profile).data},
        )

    @action(detail=False, methods=["post"], permission_classes=[IsAuthenticated])
    def logout(self, request):
        Token.objects.filter(user=request.user).delete()
        return create_response(True, "Logged out successfully")


class ProfileViewSet(viewsets.GenericViewSet):
    serializer_class = ProfileSerializer

    def get_queryset(self):
        return Profile.objects.filter(user=self.request.user)

    @action(detail=False, methods=["get", "patch"])
    def me(self, request):
        profile = _profile_for(request.user)
        if request.method == "GET":
            return create_response(True, "Profile", ProfileSerializer(profile).data)

        serializer = ProfileSerializer(profile, data=request.data, partial=True)
        if not serializer.is_valid():
            return create_response(False, "Invalid profile", serializer.errors, status_code=status.HTTP_400_BAD_REQUEST)
        serializer.save()
        return create_response(True, "Profile updated", serializer.data)

    @action(detail=False, methods=["get"])
    def onboarding_status(self, request):
        profile = Profile.objects.filter(user=request.user).first()
        return create_response(True, "Onboarding status", {"is_onboarded": bool(profile and profile.is_onboarded)})

    @action(detail=False, methods=["post"])
    def complete_onboarding(self, request):
        profile = _profile_for(request.user)
        serializer = OnboardingSerializer(profile, data=request.data)
        if not serializer.is_valid():
            return create_response(
                False, "Profile initialization failed", serializer.errors, status_code=status.HTTP_400_BAD_REQUEST
            )

        try:
            profile = serializer.save()

            generated = False
            created, failed_days = [], []
            if not DayProblem.objects.filter(user=request.user).exists():
                result = generate_problem_batch(
                    request.user, profile.skills, profile.problem_statement or "", start_day=1, count=BATCH_SIZE
                )
                generated = True
                created, failed_days = result["created"], result["failed_days"]
                sync_active_problem(request.user)

            body = {
                "profile": ProfileSerializer(profile).data,
                "created": DayProblemSerializer(
                    DayProblem.objects.filter(id__in=[p.id for p in created]).order_by("day_number"),
                    many=True,
                ).data,
                "failed_days": failed_days,
            }
            if generated and not created:
                return create_response(
                    False,
                    "Profile saved, but no challenges could be generated. Please try again.",
                    body,
                    status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                )
            return create_response(True, "Profile initialized", body, status_code=status.HTTP_201_CREATED)

        except Exception as e:
            logging.exception("Onboarding failed")
            return create_response(False, str(e), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
