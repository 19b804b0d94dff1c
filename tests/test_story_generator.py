import pytest

from jira_story_assistant.core.story_generator import SYSTEM_PROMPT, StoryGenerator, parse_story
from jira_story_assistant.utils.exceptions import ModelResponseError, ResponseParseError, ValidationError
from tests.helpers import MARKDOWN_STORY, PLAIN_STORY

EXPECTED_TITLE = "Add CSV export to the reports page"
EXPECTED_BODY = (
    "Users need to download report data for offline analysis.\n"
    "The export should respect the filters currently applied."
)
EXPECTED_CRITERIA = (
    "* Given a filtered report, when the user clicks Export, then a CSV with the filtered rows is downloaded.\n"
    "* Given an empty report, when the user clicks Export, then a CSV with only headers is downloaded."
)


def test_parse_markdown_sections():
    draft = parse_story(MARKDOWN_STORY)
    assert draft.title == EXPECTED_TITLE
    assert draft.description == f"{EXPECTED_BODY}\n\nAcceptance Criteria:\n{EXPECTED_CRITERIA}"


def test_parse_plain_labels_falls_back():
    draft = parse_story(PLAIN_STORY)
    assert draft.title == EXPECTED_TITLE
    assert draft.description == f"{EXPECTED_BODY}\n\nAcceptance Criteria:\n{EXPECTED_CRITERIA}"


def test_parse_without_acceptance_criteria_has_no_heading():
    draft = parse_story("**Title:** Fix login\n\n**Description:**\nThe login button does nothing.\n")
    assert draft.title == "Fix login"
    assert draft.description == "The login button does nothing."
    assert "Acceptance Criteria" not in draft.description


def test_parse_bold_label_with_colon_outside():
    draft = parse_story("**Title**: Fix login\n**Description**: Button broken")
    assert draft.title == "Fix login"
    assert draft.description == "Button broken"


def test_parse_missing_sections_returns_empty_strings():
    draft = parse_story("Sorry, I can't help with that.")
    assert draft.title == ""
    assert draft.description == ""


def test_first_title_wins():
    content = "Title: First\nDescription: mentions Title: Second inside"
    assert parse_story(content).title == "First"


def test_generate_sends_story_prompt(openai_client):
    openai_client.chat.return_value = MARKDOWN_STORY
    draft = StoryGenerator(openai_client).generate("CSV export for reports")

    assert draft.title == EXPECTED_TITLE
    messages = openai_client.chat.call_args.args[0]
    assert messages[0] == {"role": "system", "content": SYSTEM_PROMPT}
    assert "CSV export for reports" in messages[1]["content"]
    assert "Given..., when..., then..." in messages[1]["content"]
    assert openai_client.chat.call_args.kwargs["max_tokens"] == 600


def test_generate_requires_task(openai_client):
    with pytest.raises(ValidationError):
        StoryGenerator(openai_client).generate("   ")
    openai_client.chat.assert_not_called()


def test_generate_unparseable_reply_is_parse_error(openai_client):
    openai_client.chat.return_value = "Here is some prose with no labelled sections."
    with pytest.raises(ResponseParseError):
        StoryGenerator(openai_client).generate("CSV export")


def test_generate_propagates_missing_content(openai_client):
    openai_client.chat.side_effect = ModelResponseError("No valid response from Azure OpenAI.")
    with pytest.raises(ModelResponseError):
        StoryGenerator(openai_client).generate("CSV export")
