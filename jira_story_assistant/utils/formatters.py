"""
Formatting utilities for the Jira Story Assistant.
"""

from rich.table import Table

from ..core.models import QualityAssessment, SubmissionResult, TicketDraft

QUALITY_ICONS = {
    "excellent": "🎯",
    "good": "👍",
    "needs_improvement": "⚠️",
}

QUALITY_STYLES = {
    "excellent": "green",
    "good": "cyan",
    "needs_improvement": "yellow",
}

def format_draft(draft: TicketDraft) -> str:
    """Format a story draft for display."""
    return f"""[bold]Title:[/bold] {draft.title}

[bold]Description:[/bold]
{draft.description}
"""

def format_quality_summary(assessment: QualityAssessment) -> str:
    level = assessment.quality_level
    style = QUALITY_STYLES[level]
    return (
        f"[{style}]{QUALITY_ICONS[level]} Story Quality: {assessment.overall_score}% - "
        f"{assessment.recommendation}[/{style}]\n"
        f"{assessment.passed_count} of {assessment.total_count} criteria met based on AI analysis"
    )

def format_checklist(assessment: QualityAssessment) -> Table:
    table = Table(title="Story Checklist", show_lines=False)
    table.add_column("", width=2)
    table.add_column("Criterion", style="bold")
    table.add_column("Reason")
    for criterion in assessment.criteria:
        table.add_row("✅" if criterion.passed else "❌", criterion.name, criterion.reason)
    return table

def format_submission_result(result: SubmissionResult) -> str:
    if result.errors:
        return "[red]" + "\n".join(result.lines) + "[/red]"
    parts = []
    for outcome in result.outcomes:
        style = "green" if outcome.success else "red"
        parts.append(f"[{style}]{outcome.message}[/{style}]")
        if outcome.details:
            parts.append(outcome.details)
    return "\n".join(parts) if parts else result.text
