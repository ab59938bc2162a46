import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Key-value blob store holding salary_records / salary_settings
DATA_FILE = os.getenv("DATA_FILE", "instance/salary_tracker.json")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
