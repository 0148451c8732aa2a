from django.conf import settings
from django.db import models


class Profile(models.Model):
    GENDERS = [
        ("male", "Male"), ("female", "Female"), ("other", "Other"),
        ("prefer_not_to_say", "Prefer not to say"),
    ]
    user = models.OneToOneField(settings.AUTH_USER_MODEL, related_name="profile", on_delete=models.CASCADE)
    name = models.CharField(max_length=120, blank=True, default="")
    gender = models.CharField(max_length=32, choices=GENDERS, null=True, blank=True)
    # ordered by self-reported confidence, strongest first
    skills = models.JSONField(default=list, blank=True)
    problem_statement = models.TextField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    @property
    def is_onboarded(self) -> bool:
        return bool(self.skills)

    def __str__(self):
        return self.name or self.user.get_username()
