from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List

from .models import Record
from .view import ViewSnapshot, ViewState

# Discord refuses messages longer than this
MESSAGE_LIMIT = 2000


@dataclass(frozen=True)
class StatusStyle:
    label: str
    marker: str


STATUS_STYLES: Dict[str, StatusStyle] = {
    "upcoming": StatusStyle(label="Upcoming", marker="🔵"),
    "ongoing": StatusStyle(label="Ongoing", marker="🟢"),
    "past": StatusStyle(label="Past", marker="🟣"),
}


def format_date(record: Record) -> str:
    if record.date is None:
        return ""
    return f"{record.date:%B} {record.date.day}, {record.date.year}"


def truncate(text: str, limit: int = MESSAGE_LIMIT) -> str:
    if len(text) <= limit:
        return text
    return text[: limit - 3] + "..."


def _event_lines(record: Record) -> List[str]:
    lines = [f"**{record.title}**"]
    when = format_date(record)
    if when:
        lines.append(f"*{when}*")
    if record.description:
        lines.append(record.description)
    link = record.extra.get("link")
    if link:
        lines.append(f"<{link}>")
    return lines


def render_events(snapshot: ViewSnapshot) -> str:
    """
    Render the active status tab of an events view.

    Loading, failed and ready-but-empty are rendered differently so a reader
    never mistakes a failed fetch for an empty tab.
    """
    style = STATUS_STYLES[snapshot.active_status]
    tabs = " | ".join(
        f"[{s.label}]" if status == snapshot.active_status else s.label
        for status, s in STATUS_STYLES.items()
    )
    header = f"{style.marker} **{style.label} events**  ({tabs})"

    if snapshot.state is ViewState.LOADING:
        return f"{header}\n\nLoading events..."
    if snapshot.state is ViewState.FAILED:
        return f"{header}\n\n⚠️ {snapshot.error}"
    if not snapshot.records:
        return f"{header}\n\nNo {snapshot.active_status} events found."

    blocks = ["\n".join(_event_lines(r)) for r in snapshot.records]
    return truncate(header + "\n\n" + "\n\n".join(blocks))


def render_news(records: Iterable[Record]) -> str:
    parts = []
    for r in records:
        meta = " - ".join(
            x for x in (r.extra.get("company"), r.extra.get("location"), format_date(r)) if x
        )
        block = f"**{r.title}**"
        if meta:
            block += f"\n*{meta}*"
        if r.description:
            block += f"\n{r.description}"
        parts.append(block)
    if not parts:
        return "No news found."
    return truncate("📰 **News**\n\n" + "\n\n".join(parts))


def render_team(records: Iterable[Record]) -> str:
    leads, members = [], []
    for r in records:
        role = r.extra.get("role") or ""
        line = f"**{r.title}**" + (f" - {role}" if role else "")
        handles = [
            f"<{r.extra[k]}>" for k in ("linkedin", "twitter", "github") if r.extra.get(k)
        ]
        if handles:
            line += "  " + " ".join(handles)
        (leads if r.extra.get("isLead") else members).append(line)
    if not leads and not members:
        return "No team members found."
    return truncate("👥 **Team**\n\n" + "\n".join(leads + members))
