from pydantic import BaseModel, ConfigDict, Field


class DeviceInfo(BaseModel):
    """Snapshot of the host build metadata returned by `getDeviceInfo`.

    Built fresh for every request. Serialise with `model_dump(by_alias=True)`
    to get the wire field names.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    sdk_int: int = Field(..., alias="sdkInt", description="Host API level.")
    model: str = Field(..., description="Device model identifier.")
    manufacturer: str = Field(..., description="Device manufacturer.")
    brand: str = Field(..., description="Consumer-visible brand.")
    device: str = Field(..., description="Device codename.")
    android_version: str = Field(..., alias="androidVersion", description="OS release string.")
