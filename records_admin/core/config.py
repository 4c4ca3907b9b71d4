from pathlib import Path

from pydantic_settings import BaseSettings

BASE_DIR = Path(__file__).resolve().parent.parent.parent


class Settings(BaseSettings):
    app_name: str = "Student Records Admin"
    database_url: str = f"sqlite:///{BASE_DIR}/student_records.db"
    log_level: str = "INFO"

    # create the fixed teacher records when the app starts
    seed_on_startup: bool = True

    # web client dev server
    cors_origins: list[str] = ["http://localhost:5173"]

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()

# Grade policy
GRADE_MIN = 0
GRADE_MAX = 100

# matches the students.name column
NAME_MAX_LENGTH = 255

# DEV ONLY: hardcoded credentials. Later we will replace with a real identity provider.
ADMIN_CREDENTIALS = {
    "username": "admin",
    "password": "admin123",
}

# each teacher login maps to a Teacher record by name
TEACHER_CREDENTIALS = [
    {"username": "teacher1", "password": "pass123", "teacher_name": "Professor Smith"},
    {"username": "teacher2", "password": "pass456", "teacher_name": "Dr. Johnson"},
]

SEED_TEACHER_NAMES = tuple(c["teacher_name"] for c in TEACHER_CREDENTIALS)
