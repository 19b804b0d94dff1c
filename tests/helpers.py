"""
Shared test data and response doubles.
"""

import json
from unittest.mock import MagicMock


MARKDOWN_STORY = """**Title:** Add CSV export to the reports page

**Description:**
Users need to download report data for offline analysis.
The export should respect the filters currently applied.

**Acceptance Criteria:**
* Given a filtered report, when the user clicks Export, then a CSV with the filtered rows is downloaded.
* Given an empty report, when the user clicks Export, then a CSV with only headers is downloaded.
"""

PLAIN_STORY = """Title: Add CSV export to the reports page

Description:
Users need to download report data for offline analysis.
The export should respect the filters currently applied.

Acceptance Criteria:
* Given a filtered report, when the user clicks Export, then a CSV with the filtered rows is downloaded.
* Given an empty report, when the user clicks Export, then a CSV with only headers is downloaded.
"""

ASSESSMENT = {
    "criteria": [
        {"id": "title", "name": "Clear and descriptive title", "passed": True, "reason": "Concise"},
        {"id": "description", "name": "Detailed description with background and objective", "passed": True, "reason": "Has background"},
        {"id": "acceptance", "name": "Well-defined acceptance criteria with Given/When/Then format", "passed": True, "reason": "Uses GWT"},
        {"id": "value", "name": "Clear user value or business objective", "passed": True, "reason": "Offline analysis"},
        {"id": "specific", "name": "Specific and actionable requirements (no vague terms)", "passed": False, "reason": "Column set not defined"},
        {"id": "testable", "name": "Testable and measurable outcomes", "passed": True, "reason": "Observable download"},
    ],
    "overallScore": 82,
    "recommendation": "Good",
}


def make_response(status_code, body=None, text=None):
    """Build a stand-in for requests.Response."""
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 400
    if text is None:
        text = json.dumps(body) if body is not None else ""
    response.text = text
    if body is not None:
        response.json.return_value = body
    else:
        response.json.side_effect = ValueError("No JSON object could be decoded")
    return response


