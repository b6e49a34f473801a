"""Domain entities describing the robot's wireless network connection."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class WifiState(str, Enum):
    UNKNOWN = "unknown"
    CONNECTED = "connected"
    NOT_CONNECTED = "not_connected"


class WifiFrequency(str, Enum):
    W2_4GHZ = "2.4ghz"
    W5GHZ = "5ghz"


class WifiCredentialsType(str, Enum):
    WPA2_PSK = "wpa2_psk"


@dataclass
class WifiDetails:
    state: WifiState = WifiState.UNKNOWN
    signal: Optional[int] = None
    ips: List[str] = field(default_factory=list)
    frequency: Optional[WifiFrequency] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "state": self.state.value,
            "signal": self.signal,
            "ips": list(self.ips),
            "frequency": self.frequency.value if self.frequency else None,
        }


@dataclass
class WifiCredentials:
    type: WifiCredentialsType
    type_specific_settings: Dict[str, Any] = field(default_factory=dict)

    @property
    def password(self) -> Optional[str]:
        return self.type_specific_settings.get("password")


@dataclass
class WifiConfiguration:
    """Connection state reported by the robot, or the network it should join."""

    ssid: Optional[str] = None
    credentials: Optional[WifiCredentials] = None
    details: WifiDetails = field(default_factory=WifiDetails)

    def to_dict(self) -> Dict[str, Any]:
        # Credentials are write-only and never reported back.
        return {"ssid": self.ssid, "details": self.details.to_dict()}
