"""Use cases GitHub."""

from .relay_dependabot_alert import RelayDependabotAlertUseCase

__all__ = ["RelayDependabotAlertUseCase"]
