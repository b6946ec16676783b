import logging
from pathlib import Path

from pydantic import AliasChoices, Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=None, extra="ignore", validate_assignment=True)

    DEVICE_INFO_SERVICE_VERSION: str = Field(
        "dev",
        min_length=1,
        validation_alias=AliasChoices("DEVICE_INFO_SERVICE_VERSION", "DEVICE_INFO_SERVICE_IMAGE_RELEASE_VERSION"),
    )
    DEVICE_INFO_SERVICE_LOG_LEVEL: int = Field(20, ge=0, le=50)
    DEVICE_INFO_SERVICE_DEBUG_MODE: bool = Field(False)

    DEVICE_INFO_SERVICE_HOST: str = Field("0.0.0.0", min_length=1)
    DEVICE_INFO_SERVICE_PORT: int = Field(8090, ge=1, le=65535)
    DEVICE_INFO_WEB_SERVICE_WORKERS: int = Field(1, ge=1)

    # empty string disables the getprop lookup, only build.prop files are read
    DEVICE_INFO_GETPROP_PATH: str = "getprop"
    DEVICE_INFO_GETPROP_TIMEOUT: int = Field(5, gt=0)
    DEVICE_INFO_BUILD_PROP_FILES: str = "/system/build.prop,/vendor/build.prop,/product/build.prop"

    @field_validator("DEVICE_INFO_GETPROP_PATH", mode="before")
    @classmethod
    def strip_getprop_path(cls, value: str | None) -> str:
        return str(value or "").strip()

    @field_validator("DEVICE_INFO_WEB_SERVICE_WORKERS")
    @classmethod
    def warn_on_many_workers(cls, value: int) -> int:
        if value > 8:
            logging.warning(
                "DEVICE_INFO_WEB_SERVICE_WORKERS=%s is unusually high for a metadata-only service.", value
            )
        return value

    @computed_field  # type: ignore[prop-decorator]
    @property
    def SERVICE_VERSION(self) -> str:
        return self.DEVICE_INFO_SERVICE_VERSION

    @computed_field  # type: ignore[prop-decorator]
    @property
    def LOG_LEVEL(self) -> int:
        # 50 - CRITICAL, 40 - ERROR, 30 - WARNING, 20 - INFO, 10 - DEBUG, 0 - NOTSET
        return self.DEVICE_INFO_SERVICE_LOG_LEVEL

    @computed_field  # type: ignore[prop-decorator]
    @property
    def DEBUG_MODE(self) -> bool:
        return self.DEVICE_INFO_SERVICE_DEBUG_MODE

    @computed_field  # type: ignore[prop-decorator]
    @property
    def ROOT_DIR(self) -> str:
        return str(Path(__file__).resolve().parents[1])

    @computed_field  # type: ignore[prop-decorator]
    @property
    def HOST(self) -> str:
        return self.DEVICE_INFO_SERVICE_HOST

    @computed_field  # type: ignore[prop-decorator]
    @property
    def PORT(self) -> int:
        return self.DEVICE_INFO_SERVICE_PORT

    @computed_field  # type: ignore[prop-decorator]
    @property
    def WEB_SERVICE_WORKERS(self) -> int:
        return self.DEVICE_INFO_WEB_SERVICE_WORKERS

    @computed_field  # type: ignore[prop-decorator]
    @property
    def GETPROP_PATH(self) -> str:
        return self.DEVICE_INFO_GETPROP_PATH

    @computed_field  # type: ignore[prop-decorator]
    @property
    def GETPROP_TIMEOUT(self) -> int:
        return self.DEVICE_INFO_GETPROP_TIMEOUT

    @computed_field  # type: ignore[prop-decorator]
    @property
    def BUILD_PROP_FILES(self) -> list[str]:
        return [entry.strip() for entry in self.DEVICE_INFO_BUILD_PROP_FILES.split(",") if entry.strip()]


settings = Settings()  # type: ignore[call-arg]
