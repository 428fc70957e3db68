"""
Gauger Shared Module
=====================

Configuration, logging, console and base models shared by the Gauger
packages.
"""

from shared.config import GaugeConfig, get_config

__all__ = ["GaugeConfig", "get_config"]
