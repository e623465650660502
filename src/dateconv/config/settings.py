"""Settings — init overrides and ``DATECONV_*`` env vars in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — overrides passed to :meth:`DateconvSettings.load`
  2. Env vars     — ``DATECONV_`` prefix
  3. Code defaults
"""

from __future__ import annotations

from typing import Any

from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from dateconv.domain.layouts import Layout


class DateconvSettings(BaseSettings):
    """Frozen settings for dateconv.

    Attributes:
        default_layout: Layout used by ``format_default``.
        verbose: Enable DEBUG logging for the ``dateconv`` logger.
        log_json: Emit structured JSON log lines instead of console output.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "DATECONV_",
    }

    default_layout: Layout = Layout.PRIMARY
    verbose: bool = False
    log_json: bool = False

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Only init kwargs and env vars; no dotenv or secrets files."""
        return (init_settings, env_settings)

    @classmethod
    def load(cls, **overrides: Any) -> DateconvSettings:
        """Build settings, dropping overrides left as ``None``."""
        return cls(**{k: v for k, v in overrides.items() if v is not None})
