"""Configuration module for the credential bridge."""

from .settings import BridgeConfig, LoggingSettings


__all__ = ["BridgeConfig", "LoggingSettings"]
