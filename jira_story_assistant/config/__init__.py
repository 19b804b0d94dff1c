"""
Configuration for the Jira Story Assistant.
"""

from .settings import ENV_VARS, get_settings
from .logging_config import setup_logging

__all__ = ['ENV_VARS', 'get_settings', 'setup_logging']
