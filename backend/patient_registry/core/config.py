import os
from pydantic_settings import BaseSettings

BASE_DIR = os.path.dirname(os.path.dirname(__file__))


class Settings(BaseSettings):
    # 🧠 App Info
    PROJECT_NAME: str = os.getenv("PROJECT_NAME", "Cadastro de Pacientes")
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")

    # 🗄️ Database (PostgreSQL or SQLite via DATABASE_URL)
    POSTGRES_USER: str = os.getenv("POSTGRES_USER", "postgres")
    POSTGRES_PASSWORD: str = os.getenv("POSTGRES_PASSWORD", "postgres")
    POSTGRES_HOST: str = os.getenv("POSTGRES_HOST", "localhost")
    POSTGRES_PORT: str = os.getenv("POSTGRES_PORT", "5432")
    POSTGRES_DB: str = os.getenv("POSTGRES_DB", "app")

    DATABASE_URL: str = os.getenv(
        "DATABASE_URL",
        f"postgresql+psycopg2://{POSTGRES_USER}:{POSTGRES_PASSWORD}@{POSTGRES_HOST}:{POSTGRES_PORT}/{POSTGRES_DB}"
    )

    # 🖼️ Templates
    TEMPLATES_DIR: str = os.getenv("TEMPLATES_DIR", os.path.join(BASE_DIR, "templates"))

    # 🕓 Logs
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

settings = Settings()
