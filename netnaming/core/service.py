"""Service layer used by the CLI and the public API."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from netnaming.core.errors import NetNamingError
from netnaming.core.model import NamingScheme
from netnaming.core.schemes import NamingSchemeResolver, default_resolver, naming_scheme_from_name
from netnaming.core.sysattr import SysattrFilter
from netnaming.sources.base import PropertyStore
from netnaming.sources.device_loader import load_device
from netnaming.sources.memory import MemoryPropertyStore
from netnaming.sources.sysfs import SYS_ROOT, SysfsDevice, SysfsPropertyStore

SYSATTR_KINDS = ("int", "unsigned", "bool", "string")


class NamingService:
    def __init__(
        self,
        *,
        resolver: NamingSchemeResolver | None = None,
        sysfs_store: SysfsPropertyStore | None = None,
        memory_store: MemoryPropertyStore | None = None,
        sys_root: Path = SYS_ROOT,
    ) -> None:
        self.resolver = resolver or default_resolver()
        self.sysfs_store = sysfs_store or SysfsPropertyStore()
        self.memory_store = memory_store or MemoryPropertyStore()
        self.sys_root = sys_root

    def naming_scheme(self) -> NamingScheme:
        return self.resolver.resolve()

    def list_schemes(self) -> list[NamingScheme]:
        return list(self.resolver.schemes)

    def find_scheme(self, name: str) -> NamingScheme | None:
        return naming_scheme_from_name(name, self.resolver.schemes)

    def open_device(
        self,
        *,
        ifname: str | None = None,
        path: Path | None = None,
    ) -> tuple[Any, PropertyStore]:
        if ifname and path:
            raise NetNamingError("Use either an interface name or a device file, not both.")
        if path is not None:
            return load_device(path), self.memory_store
        if ifname:
            return SysfsDevice.from_ifname(ifname, sys_root=self.sys_root), self.sysfs_store
        raise NetNamingError("No device given. Use --ifname or --device.")

    def sysattr_allowed(self, device: Any, store: PropertyStore, sysattr: str) -> bool:
        return SysattrFilter(store).allowed(device, sysattr)

    def read_sysattr(self, device: Any, store: PropertyStore, sysattr: str, kind: str = "string") -> Any:
        sysattr_filter = SysattrFilter(store)
        if kind == "int":
            return sysattr_filter.get_filtered_int(device, sysattr)
        if kind == "unsigned":
            return sysattr_filter.get_filtered_unsigned(device, sysattr)
        if kind == "bool":
            return sysattr_filter.get_filtered_bool(device, sysattr)
        if kind == "string":
            return sysattr_filter.get_filtered_string(device, sysattr)
        allowed = ", ".join(SYSATTR_KINDS)
        raise NetNamingError(f"Unsupported sysattr type '{kind}'. Allowed: {allowed}")
