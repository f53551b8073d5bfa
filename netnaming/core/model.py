"""Core data models used across the registry, the filter, and the CLI."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class NamingFlag(enum.IntFlag):
    SR_IOV_V = 1 << 0
    NPAR_ARI = 1 << 1
    INFINIBAND = 1 << 2
    ZERO_ACPI_INDEX = 1 << 3
    ALLOW_RERENAMES = 1 << 4
    STABLE_VIRTUAL_MACS = 1 << 5
    NETDEVSIM = 1 << 6
    LABEL_NOPREFIX = 1 << 7
    NSPAWN_LONG_HASH = 1 << 8
    BRIDGE_NO_SLOT = 1 << 9
    SLOT_FUNCTION_ID = 1 << 10
    INDEX_16BIT = 1 << 11
    REPLACE_STRICTLY = 1 << 12
    XEN_VIF = 1 << 13
    BRIDGE_MULTIFUNCTION_SLOT = 1 << 14
    DEVICETREE_ALIASES = 1 << 15
    USB_HOST = 1 << 16
    SR_IOV_R = 1 << 17


class NamePolicy(enum.Enum):
    KERNEL = "kernel"
    KEEP = "keep"
    DATABASE = "database"
    ONBOARD = "onboard"
    SLOT = "slot"
    PATH = "path"
    MAC = "mac"


@dataclass(frozen=True)
class NamingScheme:
    name: str
    flags: NamingFlag

    def has(self, flag: NamingFlag) -> bool:
        return (self.flags & flag) == flag

    def enabled_flags(self) -> tuple[NamingFlag, ...]:
        return tuple(flag for flag in NamingFlag if flag & self.flags)
