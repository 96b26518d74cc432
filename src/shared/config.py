from typing import Dict

from pydantic_settings import BaseSettings, SettingsConfigDict

from src.const import DEFAULT_LOG_LEVEL, LIBRARY_LOG_LEVELS


class Config(BaseSettings):
    """Process-wide settings for the API tester.

    Only logging verbosity lives here; the load run itself is configured
    from the command line.
    """

    log_level: str = DEFAULT_LOG_LEVEL
    library_log_levels: Dict[str, str] = dict(LIBRARY_LOG_LEVELS)

    model_config = SettingsConfigDict(
        env_prefix='API_TESTER_',
    )
