"""
Logging setup for the Jira Story Assistant.
"""

import logging

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

def setup_logging(level: int = logging.INFO) -> None:
    """Configure root logging once for the CLI and the relay."""
    logging.basicConfig(format=LOG_FORMAT, level=level)
    # urllib3 logs every connection at DEBUG
    logging.getLogger("urllib3").setLevel(logging.WARNING)

def set_level(level: int) -> None:
    logging.getLogger().setLevel(level)
    logging.getLogger("jira_story_assistant").setLevel(level)
