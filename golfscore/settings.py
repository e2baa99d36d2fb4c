"""
Django settings for golfscore.

The scoring engine itself needs no database; settings exist for the
management commands, logging and scoring rule overrides.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get("GOLFSCORE_SECRET_KEY", "golfscore-insecure-dev-key")

DEBUG = os.environ.get("GOLFSCORE_DEBUG", "") == "1"

ALLOWED_HOSTS = []

INSTALLED_APPS = [
    'golfscore.scoring_core',
    'golfscore.scorecard',
]

MIDDLEWARE = []

DATABASES = {}

USE_TZ = True

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# Overrides for golfscore.scoring_core.scoring.ScoringRules, e.g.
# {"lone_wolf": {"win": 4, "loss": 1, "tie": 1}}
GOLFSCORE_RULES = {}

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '%(levelname)s %(name)s: %(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'loggers': {
        'golfscore': {
            'handlers': ['console'],
            'level': os.environ.get("GOLFSCORE_LOG_LEVEL", "WARNING"),
        },
    },
}
