from django.apps import AppConfig


class DailyChallengesConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "DailyChallenges"
