import os
from typing import Dict, Any
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Environment variables
ENV_VARS = {
    "AZURE_OPENAI_API_KEY": "AZURE_OPENAI_API_KEY",
    "AZURE_OPENAI_ENDPOINT": "AZURE_OPENAI_ENDPOINT",
    "AZURE_OPENAI_DEPLOYMENT": "AZURE_OPENAI_DEPLOYMENT",
    "AZURE_OPENAI_API_VERSION": "AZURE_OPENAI_API_VERSION",
    "AZURE_OPENAI_TEMPERATURE": "AZURE_OPENAI_TEMPERATURE",
    "AZURE_OPENAI_SEED": "AZURE_OPENAI_SEED",
    "JIRA_URL": "JIRA_URL",
    "JIRA_AUTH_TOKEN": "JIRA_AUTH_TOKEN",
    "JIRA_PROJECT": "JIRA_PROJECT",
    "JIRA_ISSUE_TYPE": "JIRA_ISSUE_TYPE",
    "GITHUB_API_URL": "GITHUB_API_URL",
    "GITHUB_TOKEN": "GITHUB_TOKEN",
    "GITHUB_REPOSITORY": "GITHUB_REPOSITORY",
    "RELAY_HOST": "RELAY_HOST",
    "RELAY_PORT": "RELAY_PORT",
    "RELAY_URL": "RELAY_URL",
}

# Azure OpenAI settings
OPENAI_SETTINGS = {
    "endpoint": os.getenv(ENV_VARS["AZURE_OPENAI_ENDPOINT"], "https://your-resource.openai.azure.com"),
    "deployment": os.getenv(ENV_VARS["AZURE_OPENAI_DEPLOYMENT"], "gpt-4.1-mini"),
    "api_version": os.getenv(ENV_VARS["AZURE_OPENAI_API_VERSION"], "2025-01-01-preview"),
    # Validation runs deterministically: zero temperature and a fixed seed
    "temperature": float(os.getenv(ENV_VARS["AZURE_OPENAI_TEMPERATURE"], "0")),
    "seed": int(os.getenv(ENV_VARS["AZURE_OPENAI_SEED"], "12345")),
    "story_max_tokens": 600,
    "validation_max_tokens": 800,
    "timeout": 60,
}

# Jira settings
JIRA_SETTINGS = {
    "url": os.getenv(ENV_VARS["JIRA_URL"], "https://jira.example.com"),
    "project": os.getenv(ENV_VARS["JIRA_PROJECT"], ""),
    "issue_type": os.getenv(ENV_VARS["JIRA_ISSUE_TYPE"], "Story"),
    "default_label": "JiraAI",
    "timeout": 30,
}

# GitHub settings
GITHUB_SETTINGS = {
    "api_url": os.getenv(ENV_VARS["GITHUB_API_URL"], "https://api.github.com"),
    "accept": "application/vnd.github.v3+json",
    "user_agent": "JiraAI-WebApp",
    "repository": os.getenv(ENV_VARS["GITHUB_REPOSITORY"], ""),
    "timeout": 30,
}

# Relay settings
RELAY_SETTINGS = {
    "host": os.getenv(ENV_VARS["RELAY_HOST"], "127.0.0.1"),
    "port": int(os.getenv(ENV_VARS["RELAY_PORT"], "4000")),
    "url": os.getenv(ENV_VARS["RELAY_URL"], "http://localhost:4000"),
    "timeout": 60,
}

def get_settings() -> Dict[str, Any]:
    """Get all settings as a dictionary."""
    return {
        "openai": OPENAI_SETTINGS,
        "jira": JIRA_SETTINGS,
        "github": GITHUB_SETTINGS,
        "relay": RELAY_SETTINGS,
    }
