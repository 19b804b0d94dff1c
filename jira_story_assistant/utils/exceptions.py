class StoryAssistantError(Exception):
    """Base exception for Jira Story Assistant."""
    pass

class ConfigurationError(StoryAssistantError):
    """Raised when there's an error in configuration."""
    pass

class ValidationError(StoryAssistantError):
    """Raised when user input validation fails.

    Carries every problem found so they can be reported together.
    """

    def __init__(self, messages):
        if isinstance(messages, str):
            messages = [messages]
        self.messages = list(messages)
        super().__init__("; ".join(self.messages))

class OpenAIError(StoryAssistantError):
    """Raised when the Azure OpenAI API call fails."""

    def __init__(self, message: str, status_code: int = None):
        self.status_code = status_code
        super().__init__(message)

class ModelResponseError(OpenAIError):
    """Raised when the API answered but returned no message content."""
    pass

class ResponseParseError(StoryAssistantError):
    """Raised when the model output could not be understood."""
    pass

class RelayConnectionError(StoryAssistantError):
    """Raised when the relay server cannot be reached."""
    pass

class ActionInProgressError(StoryAssistantError):
    """Raised when an action is triggered again before it finished."""
    pass

def handle_error(error: Exception) -> str:
    """Handle different types of errors and return appropriate messages."""
    if isinstance(error, ConfigurationError):
        return f"Configuration error: {str(error)}"
    elif isinstance(error, ValidationError):
        return "Validation error: " + "\n".join(f"❌ {m}" for m in error.messages)
    elif isinstance(error, OpenAIError):
        if error.status_code:
            return f"Azure OpenAI error ({error.status_code}): {str(error)}"
        return f"Azure OpenAI error: {str(error)}"
    elif isinstance(error, ResponseParseError):
        return f"Could not understand the AI response: {str(error)}"
    elif isinstance(error, RelayConnectionError):
        return f"Relay error: {str(error)}"
    elif isinstance(error, ActionInProgressError):
        return f"Please wait: {str(error)}"
    else:
        return f"Unexpected error: {str(error)}"
