from pathlib import Path
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tweet_md.config import RenderConfig


class Settings(BaseSettings):
    if Path('.env').exists():
        model_config = SettingsConfigDict(
            env_prefix='TWEET_MD_', env_file='.env', env_file_encoding='utf-8', extra='ignore'
        )
    else:
        model_config = SettingsConfigDict(env_prefix='TWEET_MD_')

    # Site root for profile and search links
    base_url: str = 'https://twitter.com'

    # Logging level
    logging_level: Literal['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'] = 'INFO'

    @field_validator('base_url', mode='before')
    def strip_trailing_slash(cls, url: str) -> str:
        if not url:
            raise ValueError('base_url must not be empty')
        return url.rstrip('/')

    @field_validator('logging_level', mode='before')
    def upper_level(cls, level: str) -> str:
        return level.upper() if isinstance(level, str) else level

    def render_config(self) -> RenderConfig:
        return RenderConfig(base_url=self.base_url)
