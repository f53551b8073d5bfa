"""Property store backed by sysfs and the udev database."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from netnaming.core.errors import (
    DeviceNotFoundError,
    InvalidValueError,
    PropertyNotFoundError,
    PropertyReadError,
    SysattrNotFoundError,
)
from netnaming.core.parse import parse_boolean, parse_int, parse_unsigned

SYS_ROOT = Path("/sys")
UDEV_DB = Path("/run/udev/data")


@dataclass(frozen=True)
class SysfsDevice:
    syspath: Path
    device_id: str | None = None

    @classmethod
    def from_ifname(cls, ifname: str, *, sys_root: Path = SYS_ROOT) -> SysfsDevice:
        if not ifname or "/" in ifname or ifname in (".", ".."):
            raise DeviceNotFoundError(f"Invalid interface name '{ifname}'")
        syspath = sys_root / "class/net" / ifname
        try:
            ifindex = (syspath / "ifindex").read_text(encoding="utf-8").strip()
        except FileNotFoundError as exc:
            raise DeviceNotFoundError(f"No network interface '{ifname}' under {sys_root}") from exc
        except OSError as exc:
            raise DeviceNotFoundError(f"Could not open interface '{ifname}': {exc}") from exc
        return cls(syspath=syspath, device_id=f"n{ifindex}" if ifindex else None)


class SysfsPropertyStore:
    def __init__(self, *, udev_db: Path = UDEV_DB) -> None:
        self.udev_db = udev_db

    def _properties(self, device: SysfsDevice) -> dict[str, str]:
        if device.device_id is None:
            return {}
        path = self.udev_db / device.device_id
        try:
            content = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except OSError as exc:
            raise PropertyReadError(f"Could not read udev database entry {path}: {exc}") from exc

        properties: dict[str, str] = {}
        for line in content.splitlines():
            if not line.startswith("E:"):
                continue
            key, sep, value = line[2:].partition("=")
            if sep:
                properties[key] = value
        return properties

    def get_property(self, device: SysfsDevice, key: str) -> str:
        value = self._properties(device).get(key)
        if value is None:
            raise PropertyNotFoundError(f"Property '{key}' not set on {device.syspath}")
        return value

    def get_property_bool(self, device: SysfsDevice, key: str) -> bool:
        return parse_boolean(self.get_property(device, key))

    def get_sysattr_value(self, device: SysfsDevice, name: str) -> str:
        if not name or name.startswith("/") or ".." in Path(name).parts:
            raise InvalidValueError(f"Invalid sysattr name '{name}'")
        path = device.syspath / name
        try:
            content = path.read_text(encoding="utf-8", errors="replace")
        except (FileNotFoundError, IsADirectoryError):
            raise SysattrNotFoundError(f"Sysattr '{name}' not found") from None
        except OSError as exc:
            raise PropertyReadError(f"Could not read sysattr '{name}' of {device.syspath}: {exc}") from exc
        return content.rstrip("\n")

    def get_sysattr_int(self, device: SysfsDevice, name: str) -> int:
        return parse_int(self.get_sysattr_value(device, name))

    def get_sysattr_unsigned(self, device: SysfsDevice, name: str) -> int:
        return parse_unsigned(self.get_sysattr_value(device, name))

    def get_sysattr_bool(self, device: SysfsDevice, name: str) -> bool:
        return parse_boolean(self.get_sysattr_value(device, name))
