from dataclasses import dataclass
from enum import Enum
from typing import Optional

# The platform's reported API level. Immutable for the lifetime of a process.
ApiLevel = int


class DenialReason(Enum):
    NO_PERMISSION = "NoPermission"
    NO_HARDWARE = "NoHardware"
    OS_TOO_OLD = "OsTooOld"
    UNKNOWN = "Unknown"


@dataclass(frozen=True)
class DeviceSignal:
    """
    The outcome of reading one identifier source. A signal is either present with
    a non-empty raw value, or unavailable with no value at all.
    """

    present: bool
    raw_value: Optional[str] = None

    def __post_init__(self) -> None:
        if self.present and not self.raw_value:
            raise ValueError("A present DeviceSignal requires a non-empty raw value")
        if not self.present and self.raw_value is not None:
            raise ValueError("An unavailable DeviceSignal cannot carry a raw value")

    @classmethod
    def of(cls, raw_value: Optional[str]) -> "DeviceSignal":
        """Wrap a raw platform read, collapsing None and "" to unavailable."""
        if not raw_value:
            return cls.unavailable()
        return cls(present=True, raw_value=raw_value)

    @classmethod
    def unavailable(cls) -> "DeviceSignal":
        return cls(present=False)

    def value_or_none(self) -> Optional[str]:
        return self.raw_value


@dataclass(frozen=True)
class HashedSignal:
    present: bool
    digest_hex: Optional[str] = None

    def __post_init__(self) -> None:
        if self.present and not self.digest_hex:
            raise ValueError("A present HashedSignal requires a digest")
        if not self.present and self.digest_hex is not None:
            raise ValueError("An unavailable HashedSignal cannot carry a digest")

    @classmethod
    def unavailable(cls) -> "HashedSignal":
        return cls(present=False)

    def value_or_none(self) -> Optional[str]:
        return self.digest_hex


@dataclass(frozen=True)
class CapabilityCheck:
    """Whether an identifier source may be attempted. Only used for gating and
    diagnostics; the reason is None when the check was granted."""

    source_name: str
    granted: bool
    reason: Optional[DenialReason] = None

    @classmethod
    def allow(cls, source_name: str) -> "CapabilityCheck":
        return cls(source_name=source_name, granted=True)

    @classmethod
    def deny(cls, source_name: str, reason: DenialReason) -> "CapabilityCheck":
        return cls(source_name=source_name, granted=False, reason=reason)
