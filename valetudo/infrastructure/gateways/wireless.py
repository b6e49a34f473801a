"""
Embedded wireless probe - Infrastructure layer.

When the service runs on the robot itself the connection is read from the
local wireless interface instead of asking the vendor firmware.
"""

from __future__ import annotations

import asyncio
import re
from typing import List, Optional, Tuple

from valetudo.domain.entities.errors import DeviceTransportError
from valetudo.domain.entities.wifi import (
    WifiConfiguration,
    WifiDetails,
    WifiFrequency,
    WifiState,
)
from valetudo.shared import get_logger

logger = get_logger(__name__)

_SSID_RE = re.compile(r"^\s*SSID:\s*(.+)$", re.MULTILINE)
_FREQ_RE = re.compile(r"^\s*freq:\s*(\d+)", re.MULTILINE)
_SIGNAL_RE = re.compile(r"^\s*signal:\s*(-?\d+)", re.MULTILINE)
_ADDRESS_RE = re.compile(r"\binet6?\s+([0-9a-fA-F.:]+)/\d+")


def parse_iw_link(output: str) -> Tuple[Optional[str], WifiDetails]:
    """Parse the output of ``iw dev <interface> link``."""
    if not output.strip().startswith("Connected to"):
        return None, WifiDetails(state=WifiState.NOT_CONNECTED)

    details = WifiDetails(state=WifiState.CONNECTED)

    ssid_match = _SSID_RE.search(output)
    signal_match = _SIGNAL_RE.search(output)
    freq_match = _FREQ_RE.search(output)

    if signal_match:
        details.signal = int(signal_match.group(1))
    if freq_match:
        details.frequency = (
            WifiFrequency.W5GHZ
            if int(freq_match.group(1)) >= 5000
            else WifiFrequency.W2_4GHZ
        )

    return (ssid_match.group(1).strip() if ssid_match else None), details


def parse_ip_addresses(output: str) -> List[str]:
    """Parse the addresses out of ``ip -o addr show dev <interface>``."""
    return _ADDRESS_RE.findall(output)


async def _run(*args: str) -> str:
    process = await asyncio.create_subprocess_exec(
        *args,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
    )
    stdout, stderr = await process.communicate()
    if process.returncode != 0:
        raise DeviceTransportError(
            f"{args[0]} exited with {process.returncode}",
            {"stderr": stderr.decode(errors="replace").strip()},
        )
    return stdout.decode(errors="replace")


async def get_embedded_wireless_configuration(
    interface: str = "wlan0",
) -> WifiConfiguration:
    try:
        link_output = await _run("iw", "dev", interface, "link")
    except (OSError, DeviceTransportError) as e:
        logger.warning("wireless.probe_failed", interface=interface, error=str(e))
        return WifiConfiguration(details=WifiDetails(state=WifiState.UNKNOWN))

    ssid, details = parse_iw_link(link_output)
    if details.state == WifiState.CONNECTED:
        try:
            details.ips = parse_ip_addresses(
                await _run("ip", "-o", "-4", "addr", "show", "dev", interface)
            )
        except (OSError, DeviceTransportError) as e:
            logger.warning("wireless.address_probe_failed", interface=interface, error=str(e))

    return WifiConfiguration(ssid=ssid, details=details)
