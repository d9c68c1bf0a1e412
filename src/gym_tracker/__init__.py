"""gym-tracker: personal workout log with progress metrics and an AI coach."""

__version__ = "0.1.0"
