from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    pending_file: Path = Path("todos.md")
    done_file: Path = Path("done_todos.md")
    log_level: str = "INFO"

    model_config = {"env_prefix": "TODO_MCP_", "env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
