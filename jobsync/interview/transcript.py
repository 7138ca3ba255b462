from __future__ import annotations

from jobsync.schemas import InterviewResult

from .questions import INTERVIEW_TITLES


def format_duration(milliseconds: float) -> str:
    """Render milliseconds as ``m:ss``."""
    total = max(0, int(milliseconds))
    minutes = total // 60000
    seconds = (total % 60000) // 1000
    return f"{minutes}:{seconds:02d}"


def render_transcript(result: InterviewResult) -> str:
    title = INTERVIEW_TITLES.get(result.type, "Interview")
    lines = [f"# {title} Transcript", "", f"Grade: {result.grade} ({result.scores.overall}/100)", ""]
    for position, answer in enumerate(result.answers, start=1):
        lines.append(f"## Question {position}")
        lines.append(answer.question)
        lines.append("")
        shown = answer.text if answer.status == "answered" and answer.text.strip() else "Skipped"
        lines.append(f"**Your Answer:** {shown}")
        lines.append("")
        lines.append(f"**Response Time:** {format_duration(answer.response_time)}")
        lines.append("")
        lines.append("---")
        lines.append("")
    return "\n".join(lines)
