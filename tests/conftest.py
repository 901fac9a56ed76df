"""Point the app at a throwaway SQLite database before any app module is imported."""

import os
import tempfile

_DB_DIR = tempfile.mkdtemp(prefix="acquisitions-tests-")

os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_DB_DIR, 'test.db')}"
os.environ["APP_ENV"] = "dev"
os.environ["JWT_SECRET"] = "test-secret-for-the-acquisitions-suite"
# Minimum bcrypt cost keeps the suite fast; production default is 12.
os.environ["BCRYPT_ROUNDS"] = "4"
