"""lib_log_rich runtime setup shared by every entry point.

The ``[lib_log_rich]`` section is validated once with pydantic and turned
into a ``RuntimeConfig``; stdlib ``logging`` is bridged afterwards so that
module loggers (``logging.getLogger(__name__)``) such as the chart renderer
and the re-render loop reach the same sinks.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, field_validator

from markdown_echarts import __init__conf__


class LoggingConfigModel(BaseModel):
    """The ``[lib_log_rich]`` section; unknown keys pass through to lib_log_rich.

    Example:
        >>> LoggingConfigModel().environment
        'prod'
        >>> LoggingConfigModel(service="").service is None
        True
    """

    model_config = ConfigDict(extra="allow")

    service: str | None = None
    environment: str = "prod"

    @field_validator("service", mode="before")
    @classmethod
    def _blank_service_is_unset(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v


def build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    """Translate the ``[lib_log_rich]`` section into a ``RuntimeConfig``.

    The service name falls back to the package name.
    """
    section: Any = config.get("lib_log_rich", default={})
    model = LoggingConfigModel.model_validate(dict(section) if isinstance(section, Mapping) else {})
    passthrough = model.model_dump(exclude={"service", "environment"}, exclude_none=True)
    return lib_log_rich.runtime.RuntimeConfig(
        service=model.service or __init__conf__.name,
        environment=model.environment,
        **passthrough,
    )


def init_logging(config: Config) -> None:
    """Start the lib_log_rich runtime once per process.

    Later calls return immediately. ``.env`` files are loaded first so
    ``LOG_*`` variables take part in the configuration.
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(build_runtime_config(config))
    lib_log_rich.runtime.attach_std_logging()


__all__ = [
    "LoggingConfigModel",
    "build_runtime_config",
    "init_logging",
]
