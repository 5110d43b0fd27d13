import os

from dotenv import load_dotenv
load_dotenv()


class Config:
    # JWT
    SECRET_KEY = os.getenv("SECRET_KEY", "change-me")
    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", "change-me-too-please-use-a-long-random-value")
    JWT_ALGORITHM = "HS256"
    JWT_TOKEN_LOCATION = ["headers"]
    JWT_HEADER_NAME = "Authorization"
    JWT_HEADER_TYPE = "Bearer"
    JWT_ACCESS_TOKEN_EXPIRES = False

    # Database
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///steadysteps.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # "sql" keeps everything in the relational store, "synced" adds the
    # per-user JSON cache in front of it
    PROGRESS_STORE = os.getenv("PROGRESS_STORE", "sql")
    LOCAL_CACHE_DIR = os.getenv("LOCAL_CACHE_DIR", "instance/cache")

    # ======= AI COACH GATEWAY =======
    AI_GATEWAY_URL = os.getenv("AI_GATEWAY_URL", "https://ai.gateway.lovable.dev/v1/chat/completions")
    AI_GATEWAY_API_KEY = os.getenv("AI_GATEWAY_API_KEY")
    AI_MODEL = os.getenv("AI_MODEL", "google/gemini-3-flash-preview")
    AI_MAX_TOKENS = 500
    AI_TEMPERATURE = 0.7
    AI_TIMEOUT = int(os.getenv("AI_TIMEOUT", "30"))

    SCHEDULER_ENABLED = os.getenv("SCHEDULER_ENABLED", "true").lower() == "true"
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    PROGRESS_STORE = "sql"
    SCHEDULER_ENABLED = False
    AI_GATEWAY_API_KEY = "test-key"
    AI_GATEWAY_URL = "https://gateway.test/v1/chat/completions"
    LOG_LEVEL = "DEBUG"
