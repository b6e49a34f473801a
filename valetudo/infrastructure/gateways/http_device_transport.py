"""HTTP JSON-RPC device transport - Infrastructure layer."""

from __future__ import annotations

import itertools
from typing import Any, Dict, Optional

import httpx

from valetudo.domain.entities.errors import DeviceTransportError
from valetudo.domain.gateways.device_transport import IDeviceTransport
from valetudo.shared import get_logger

logger = get_logger(__name__)


class HttpDeviceTransport(IDeviceTransport):
    """
    Sends vendor commands to a JSON-RPC bridge running next to the device.

    Requests are posted to ``{base_url}/rpc`` as
    ``{"id": ..., "method": ..., "params": ...}``; the bridge answers with
    either ``{"id": ..., "result": ...}`` or ``{"id": ..., "error": {...}}``.
    """

    def __init__(self, base_url: str, timeout: float = 10.0):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._message_ids = itertools.count(1)

    async def send_command(self, method: str, params: Optional[Any] = None) -> Any:
        url = f"{self.base_url}/rpc"
        payload: Dict[str, Any] = {
            "id": next(self._message_ids),
            "method": method,
            "params": params if params is not None else [],
        }

        logger.debug("device_transport.request", method=method, message_id=payload["id"])

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(url, json=payload)
                response.raise_for_status()
                body = response.json()

        except httpx.HTTPStatusError as e:
            logger.error(
                "device_transport.http_error",
                method=method,
                status_code=e.response.status_code,
                response_text=e.response.text,
            )
            raise DeviceTransportError(
                f"Device bridge returned HTTP {e.response.status_code}",
                {"method": method},
            ) from e

        except httpx.RequestError as e:
            logger.error("device_transport.request_error", method=method, error=str(e))
            raise DeviceTransportError(
                f"Failed to communicate with device: {str(e)}", {"method": method}
            ) from e

        except ValueError as e:
            logger.error("device_transport.invalid_json", method=method, error=str(e))
            raise DeviceTransportError(
                "Malformed response from device bridge", {"method": method}
            ) from e

        if not isinstance(body, dict):
            raise DeviceTransportError(
                "Malformed response from device bridge", {"method": method}
            )

        if body.get("error"):
            error = body["error"]
            message = error.get("message") if isinstance(error, dict) else str(error)
            logger.warning("device_transport.command_error", method=method, error=message)
            raise DeviceTransportError(
                f"Device rejected {method}: {message}", {"method": method}
            )

        logger.debug("device_transport.response", method=method, message_id=payload["id"])
        return body.get("result")
