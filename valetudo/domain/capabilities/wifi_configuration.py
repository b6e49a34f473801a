"""Read and change the network the robot is connected to."""

from valetudo.domain.capabilities.base import Capability
from valetudo.domain.entities.wifi import WifiConfiguration


class WifiConfigurationCapability(Capability):
    TYPE = "WifiConfigurationCapability"

    async def get_wifi_configuration(self) -> WifiConfiguration:
        """
        Query the current connection.

        Being disconnected is reported through the returned configuration's
        state; only transport failures raise.
        """
        raise self._not_implemented("get_wifi_configuration")

    async def set_wifi_configuration(self, wifi_config: WifiConfiguration) -> None:
        """
        Ask the robot to join a network.

        Raises:
            InvalidArgumentError: If the configuration lacks an SSID or
                WPA2-PSK credentials with a password
        """
        raise self._not_implemented("set_wifi_configuration")

    def get_type(self) -> str:
        return WifiConfigurationCapability.TYPE
