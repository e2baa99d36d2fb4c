from django.apps import AppConfig


class ScorecardConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'golfscore.scorecard'
    verbose_name = 'Scorecards'
