"""Configuration schema using Pydantic."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from pydantic_settings import BaseSettings, SettingsConfigDict

from baikebot.agent.tools.baike.extract import DEFAULT_BASE_URL
from baikebot.agent.tools.baike.render import DEFAULT_FORMAT


class Base(BaseModel):
    """Base model that accepts both camelCase and snake_case keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BaikeConfig(Base):
    """Encyclopedia lookup configuration."""

    max_result_count: int = Field(default=3, gt=0)
    max_summary_length: int = Field(default=200, gt=0)
    format: str = Field(default=DEFAULT_FORMAT, min_length=1)
    unknown_placeholder: Literal["empty", "keep"] = "empty"
    prompt_timeout: float = Field(default=30.0, gt=0)  # seconds
    base_url: str = DEFAULT_BASE_URL
    request_timeout: float = Field(default=10.0, gt=0)
    user_agent: str = (
        "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/124.0 Safari/537.36"
    )


class I18nConfig(Base):
    """Localization configuration."""

    locale: str = "zh"


class LoggingConfig(Base):
    """Logging configuration."""

    level: str = "INFO"


class Config(BaseSettings):
    """Root configuration for baikebot."""

    baike: BaikeConfig = Field(default_factory=BaikeConfig)
    i18n: I18nConfig = Field(default_factory=I18nConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = SettingsConfigDict(
        env_prefix="BAIKEBOT_",
        env_nested_delimiter="__",
        alias_generator=to_camel,
        populate_by_name=True,
    )
