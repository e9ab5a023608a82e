import os
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class MarkdownSettings(BaseSettings):
    # Level of the element a markdown `#` heading renders as (2 when the page title is the h1)
    heading_start_level: int = Field(default=1, ge=1, le=6)
    # Wrap each heading and the content up to the next heading of the same or higher rank in <section>
    heading_sections: bool = False

    footnote_heading: str = "Footnotes"
    footnote_backref_text: str = "↩ Back"

    log_level: str = "WARNING"
    log_file: Path | None = None  # JSONL sink, disabled when unset

    model_config = SettingsConfigDict(
        env_prefix="BLOGMARK_",
        env_file=[os.getenv("ENV_FILE", ""), ".env"],
        extra="ignore",
    )


@lru_cache
def get_settings() -> MarkdownSettings:
    return MarkdownSettings()
