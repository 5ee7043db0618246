"""Configuration management for snippetscope"""

import logging
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from dotenv import load_dotenv

load_dotenv()

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""
    # Snippet settings
    show_code_snippets: bool = Field(True, alias="SHOW_CODE_SNIPPETS")
    snippet_context_lines: int = Field(8, alias="SNIPPET_CONTEXT_LINES")
    cache_snippet_files: bool = Field(True, alias="CACHE_SNIPPET_FILES")

    # General settings
    log_level: str = Field("WARNING", alias="LOG_LEVEL")
    verbose: bool = Field(False, alias="VERBOSE")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    def validate_settings(self) -> bool:
        """Validate configuration"""
        if self.snippet_context_lines < 0:
            raise ValueError(f"SNIPPET_CONTEXT_LINES must not be negative: {self.snippet_context_lines}")

        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.log_level}")

        return True


# Create a single global instance
settings = Settings()


def configure_logging(level: Optional[str] = None, verbose: bool = False) -> None:
    """Set up root logging for command-line use"""
    if verbose or settings.verbose:
        level = "DEBUG"
    level = (level or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
