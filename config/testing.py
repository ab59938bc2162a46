import os

SECRET_KEY = "test-secret"

DATA_FILE = os.getenv("DATA_FILE", "instance/salary_tracker_test.json")

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
