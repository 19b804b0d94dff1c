"""
Command-line interface for the Jira Story Assistant.
"""

import typer
from rich.console import Console
from rich.prompt import Confirm, Prompt
import logging

from .config.settings import get_settings, ENV_VARS
from .config.logging_config import setup_logging, set_level
from .core.assistant import StoryAssistant
from .core.models import DEFAULT_LABEL, Credentials, PlatformSelection, SubmissionOptions, TicketDraft
from .utils.exceptions import handle_error, ConfigurationError, StoryAssistantError
from .utils.formatters import format_checklist, format_draft, format_quality_summary, format_submission_result
from .utils.validators import validate_url

# Setup logging
setup_logging()
logger = logging.getLogger(__name__)

app = typer.Typer(
    name="jira-story",
    help="Jira Story Assistant - Draft Jira stories with AI and file them in Jira and GitHub",
    add_completion=False
)
console = Console()

def check_environment():
    """Check that configured URLs are usable."""
    settings = get_settings()
    bad = []
    if not validate_url(settings["openai"]["endpoint"]):
        bad.append(ENV_VARS["AZURE_OPENAI_ENDPOINT"])
    if not validate_url(settings["jira"]["url"]):
        bad.append(ENV_VARS["JIRA_URL"])
    if not validate_url(settings["relay"]["url"]):
        bad.append(ENV_VARS["RELAY_URL"])
    if bad:
        raise ConfigurationError(f"Invalid URL in: {', '.join(bad)}")
    return True

def fail(error: Exception):
    error_message = handle_error(error)
    logger.debug(error_message, exc_info=True)
    console.print(f"[red]{error_message}[/red]")
    raise typer.Exit(1)

def show_assessment(assessment):
    console.print(format_quality_summary(assessment))
    console.print(format_checklist(assessment))

def run_assessment(assistant: StoryAssistant, azure_key: str):
    """Assess the current draft; a failure is reported but not fatal."""
    try:
        with console.status("Validating story quality with AI..."):
            assessment = assistant.assess_quality(azure_key)
        show_assessment(assessment)
    except StoryAssistantError as e:
        console.print(f"[red]❌ Unable to validate story quality. {handle_error(e)}[/red]")
        console.print("[yellow]⚠️ Validation failed - manual review recommended[/yellow]")

@app.callback()
def main(
    debug: bool = typer.Option(False, "--debug", "-d", help="Enable debug mode"),
):
    """Draft, review and file Jira stories."""
    if debug:
        set_level(logging.DEBUG)
        logger.debug("Debug mode enabled")

@app.command()
def generate(
    task: str = typer.Argument(..., help="Task description in plain language"),
    azure_key: str = typer.Option("", "--azure-key", "-k", envvar=ENV_VARS["AZURE_OPENAI_API_KEY"], help="Azure OpenAI API key"),
    assess: bool = typer.Option(True, "--assess/--no-assess", help="Validate story quality after generating"),
):
    """Generate a Jira story from a task description."""
    assistant = StoryAssistant()
    try:
        check_environment()
        with console.status("Generating story..."):
            draft = assistant.generate_draft(task, azure_key)
    except StoryAssistantError as e:
        fail(e)
    console.print(format_draft(draft))
    console.print("[green]Story generated successfully.[/green]")
    if assess:
        run_assessment(assistant, azure_key)

@app.command()
def evaluate(
    title: str = typer.Option(..., "--title", "-t", help="Story title"),
    description: str = typer.Option(..., "--description", "-D", help="Story description"),
    azure_key: str = typer.Option("", "--azure-key", "-k", envvar=ENV_VARS["AZURE_OPENAI_API_KEY"], help="Azure OpenAI API key"),
):
    """Evaluate the quality of an existing story."""
    assistant = StoryAssistant()
    try:
        check_environment()
        with console.status("Re-evaluating story quality..."):
            assessment = assistant.assess_quality(azure_key, TicketDraft(title, description))
    except StoryAssistantError as e:
        fail(e)
    show_assessment(assessment)

@app.command()
def submit(
    title: str = typer.Option(..., "--title", "-t", help="Story title"),
    description: str = typer.Option(..., "--description", "-D", help="Story description"),
    jira: bool = typer.Option(True, "--jira/--no-jira", help="Create a Jira ticket"),
    github: bool = typer.Option(False, "--github/--no-github", help="Create a GitHub issue"),
    jira_token: str = typer.Option("", "--jira-token", envvar=ENV_VARS["JIRA_AUTH_TOKEN"], help="Jira auth token"),
    github_token: str = typer.Option("", "--github-token", envvar=ENV_VARS["GITHUB_TOKEN"], help="GitHub personal access token"),
    project: str = typer.Option(None, "--project", "-p", help="Jira project key"),
    issue_type: str = typer.Option(None, "--issue-type", help="Jira issue type"),
    label: str = typer.Option(DEFAULT_LABEL, "--label", "-l", help="Label for the ticket and the issue"),
    repo: str = typer.Option(None, "--repo", "-r", help="GitHub repository as owner/repo"),
):
    """File a story in Jira and/or GitHub through the relay."""
    settings = get_settings()
    assistant = StoryAssistant(settings)
    options = SubmissionOptions(
        project=project or settings["jira"]["project"],
        issue_type=issue_type or settings["jira"]["issue_type"],
        label=label,
        repository=repo or settings["github"]["repository"],
    )
    credentials = Credentials(jira_token=jira_token, github_token=github_token)
    try:
        with console.status("Creating issues..."):
            result = assistant.submit(PlatformSelection(jira=jira, github=github), credentials, options,
                                      draft=TicketDraft(title, description))
    except StoryAssistantError as e:
        fail(e)
    console.print(format_submission_result(result))
    if not result.ok or not all(o.success for o in result.outcomes):
        raise typer.Exit(1)

@app.command()
def session(
    azure_key: str = typer.Option("", "--azure-key", "-k", envvar=ENV_VARS["AZURE_OPENAI_API_KEY"], help="Azure OpenAI API key"),
    jira_token: str = typer.Option("", "--jira-token", envvar=ENV_VARS["JIRA_AUTH_TOKEN"], help="Jira auth token"),
    github_token: str = typer.Option("", "--github-token", envvar=ENV_VARS["GITHUB_TOKEN"], help="GitHub personal access token"),
):
    """Interactive session: generate, edit, re-evaluate and submit a story."""
    settings = get_settings()
    assistant = StoryAssistant(settings)
    credentials = Credentials(openai_api_key=azure_key, jira_token=jira_token, github_token=github_token)
    console.print("[green]🚀 Jira Story Assistant session. Type 'quit' to leave.[/green]")

    while True:
        action = Prompt.ask(
            "Action",
            choices=["generate", "edit", "evaluate", "show", "submit", "quit"],
            default="generate" if assistant.draft is None else "submit",
        )
        if action == "quit":
            break
        if not credentials.openai_api_key and action in ("generate", "evaluate"):
            credentials.openai_api_key = Prompt.ask("Azure API Key", password=True)

        try:
            if action == "generate":
                task = Prompt.ask("Task description")
                with console.status("Generating story..."):
                    draft = assistant.generate_draft(task, credentials.openai_api_key)
                console.print(format_draft(draft))
                run_assessment(assistant, credentials.openai_api_key)
            elif action == "edit":
                current = assistant.draft or TicketDraft()
                title = Prompt.ask("Title", default=current.title)
                description = Prompt.ask("Description", default=current.description)
                assistant.update_draft(title=title, description=description)
            elif action == "evaluate":
                run_assessment(assistant, credentials.openai_api_key)
            elif action == "show":
                if assistant.draft is not None:
                    console.print(format_draft(assistant.draft))
                if assistant.assessment is not None:
                    show_assessment(assistant.assessment)
            elif action == "submit":
                if not assistant.can_submit:
                    console.print("[yellow]Generate or edit a story before submitting.[/yellow]")
                    continue
                jira = Confirm.ask("Create Jira ticket?", default=True)
                github = Confirm.ask("Create GitHub issue?", default=False)
                if jira and not credentials.jira_token:
                    credentials.jira_token = Prompt.ask("Jira Auth Token", password=True)
                if github and not credentials.github_token:
                    credentials.github_token = Prompt.ask("GitHub Personal Access Token", password=True)
                options = SubmissionOptions(
                    project=Prompt.ask("Jira project", default=settings["jira"]["project"]) if jira else "",
                    issue_type=Prompt.ask("Issue type", default=settings["jira"]["issue_type"]) if jira else "",
                    label=Prompt.ask("Label", default=DEFAULT_LABEL),
                    repository=Prompt.ask("GitHub repository (owner/repo)", default=settings["github"]["repository"]) if github else "",
                )
                with console.status("Creating issues..."):
                    result = assistant.submit(PlatformSelection(jira=jira, github=github), credentials, options)
                console.print(format_submission_result(result))
        except StoryAssistantError as e:
            console.print(f"[red]{handle_error(e)}[/red]")

@app.command()
def relay(
    host: str = typer.Option(None, "--host", help="Interface to bind"),
    port: int = typer.Option(None, "--port", help="Port to listen on"),
):
    """Run the relay server that forwards issue creation to Jira and GitHub."""
    from .relay.app import run

    try:
        check_environment()
    except ConfigurationError as e:
        fail(e)
    run(host=host, port=port)

if __name__ == "__main__":
    app()
