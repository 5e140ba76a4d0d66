from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Settings for a changelog run, loaded from environment variables.

    Every field can be overridden with a ``SONGS_HISTORY_`` prefixed variable,
    either exported in the shell or placed in a ``.env`` file in the working
    directory.
    """

    model_config = SettingsConfigDict(
        env_prefix="SONGS_HISTORY_", env_file=".env", extra="ignore"
    )

    # Layout of the songs-backup repository
    TRACKED_DIR: str = "output/songs"
    SUMMARY_PATH: str = "output/summary.json"

    # Report output
    OUTPUT_PATH: str = "output.txt"
    REPORT_TITLE: str = "# songs-history"
    VIDEO_URL_TEMPLATE: str = "https://youtu.be/{video_id}"


@lru_cache
def get_settings() -> Settings:
    return Settings()
