"""Host build metadata access.

Reads the Android system property set the way `android.os.Build` resolves it:
`build.prop` files first, then the live `getprop` output on top. Nothing is
cached, every call to `BuildPropertyReader.read` goes back to the host.
"""

from __future__ import annotations

import os
import re
import shutil
import subprocess

from device_info_service.settings import settings
from device_info_service.utils.utils import setup_logging

UNKNOWN = "unknown"

PROP_SDK_INT = "ro.build.version.sdk"
PROP_RELEASE = "ro.build.version.release"

# init derives ro.product.<field> from the first partition defining it
PRODUCT_PROP_SOURCE_ORDER: tuple[str, ...] = ("product", "odm", "vendor", "system_ext", "system")

_GETPROP_LINE = re.compile(r"^\[(?P<key>[^\]]+)\]:\s*\[(?P<value>.*)\]$")

log = setup_logging(component_name="host_build", log_level=settings.LOG_LEVEL)


def parse_build_prop(text: str) -> dict[str, str]:
    """Parse `build.prop` content (`key=value` per line, `#` comments)."""
    props: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        if key:
            props[key] = value.strip()
    return props


def parse_getprop_output(text: str) -> dict[str, str]:
    """Parse `getprop` output, one `[key]: [value]` pair per line."""
    props: dict[str, str] = {}
    for raw_line in text.splitlines():
        match = _GETPROP_LINE.match(raw_line.strip())
        if match:
            props[match.group("key")] = match.group("value")
    return props


def get_string(props: dict[str, str], key: str) -> str:
    value = props.get(key, "")
    return value if value else UNKNOWN


def get_int(props: dict[str, str], key: str, default: int = 0) -> int:
    try:
        return int(props.get(key, "").strip())
    except ValueError:
        return default


def get_product_string(props: dict[str, str], field: str) -> str:
    """Resolve `ro.product.<field>`, falling back to the partition scoped keys."""
    value = props.get(f"ro.product.{field}", "")
    if value:
        return value
    for source in PRODUCT_PROP_SOURCE_ORDER:
        value = props.get(f"ro.product.{source}.{field}", "")
        if value:
            return value
    return UNKNOWN


class BuildPropertyReader:
    """Reads the host's Android system properties on demand."""

    def __init__(self,
                 prop_files: list[str] | None = None,
                 getprop_path: str | None = None,
                 getprop_timeout: int | None = None) -> None:
        self.prop_files = list(settings.BUILD_PROP_FILES if prop_files is None else prop_files)
        self.getprop_path = settings.GETPROP_PATH if getprop_path is None else getprop_path
        self.getprop_timeout = settings.GETPROP_TIMEOUT if getprop_timeout is None else getprop_timeout

    def read(self) -> dict[str, str]:
        props: dict[str, str] = {}
        for prop_file in self.prop_files:
            props.update(self._read_prop_file(prop_file))
        props.update(self._read_getprop())
        return props

    def _read_prop_file(self, path: str) -> dict[str, str]:
        if not os.path.isfile(path):
            return {}
        try:
            with open(path, encoding="utf-8", errors="replace") as f:
                return parse_build_prop(f.read())
        except OSError as exc:
            log.warning("could not read build properties from %s: %s", path, exc)
            return {}

    def _read_getprop(self) -> dict[str, str]:
        if not self.getprop_path:
            return {}

        executable = shutil.which(self.getprop_path)
        if executable is None:
            log.debug("getprop not available on this host: %s", self.getprop_path)
            return {}

        try:
            completed = subprocess.run(
                [executable],
                capture_output=True,
                text=True,
                timeout=self.getprop_timeout,
                check=False,
                shell=False,
            )
        except subprocess.TimeoutExpired:
            log.warning("getprop timed out after %s seconds", self.getprop_timeout)
            return {}
        except OSError as exc:
            log.warning("getprop could not be executed: %s", exc)
            return {}

        if completed.returncode != 0:
            log.warning("getprop exited with code %s: %s", completed.returncode, completed.stderr.strip())
            return {}

        return parse_getprop_output(completed.stdout)
