"""
Command test data factories.
"""
import factory

from device_relay.domain.entities import Command


class CommandFactory(factory.Factory):
    """
    Factory for Command entities.

    Usage:
        command = CommandFactory()
        command = CommandFactory(pin=5, state=0)
    """

    class Meta:
        model = Command

    pin = factory.Iterator([2, 4, 5, 12, 13])
    state = factory.Iterator([1, 0])


class ControlPayloadFactory(factory.Factory):
    """Factory for POST /api/control request bodies."""

    class Meta:
        model = dict

    deviceId = "ESP32_001"
    pin = 2
    state = True
