from django.apps import AppConfig


class ScoringCoreConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'golfscore.scoring_core'
    verbose_name = 'Golf Scoring Core'
