from datetime import datetime, timezone

from community_site.models import Record
from community_site.render import (
    MESSAGE_LIMIT,
    render_events,
    render_news,
    render_team,
    truncate,
)
from community_site.view import ViewSnapshot, ViewState


def _event(rid, title, day, **extra):
    return Record(
        id=rid,
        title=title,
        date=datetime(2024, 3, day, tzinfo=timezone.utc),
        description="A meetup",
        status="upcoming",
        extra=extra,
    )


def test_loading_failed_and_empty_are_distinct():
    loading = render_events(ViewSnapshot(ViewState.LOADING, "upcoming", ()))
    failed = render_events(ViewSnapshot(ViewState.FAILED, "upcoming", (), error="Failed to get events: HTTP 500"))
    empty = render_events(ViewSnapshot(ViewState.READY, "ongoing", ()))

    assert "Loading" in loading
    assert "Failed to get events: HTTP 500" in failed
    assert "No ongoing events found." in empty
    assert len({loading, failed, empty}) == 3


def test_ready_lists_events_with_date_and_link():
    text = render_events(ViewSnapshot(
        ViewState.READY,
        "upcoming",
        (_event("a", "Study Jam", 5, link="https://jam.example"),),
    ))

    assert "**Study Jam**" in text
    assert "March 5, 2024" in text
    assert "<https://jam.example>" in text
    assert "[Upcoming]" in text


def test_header_marks_active_tab():
    text = render_events(ViewSnapshot(ViewState.READY, "past", ()))
    assert "[Past]" in text
    assert "[Upcoming]" not in text


def test_truncate_respects_message_limit():
    assert truncate("short") == "short"
    long = truncate("x" * (MESSAGE_LIMIT + 50))
    assert len(long) == MESSAGE_LIMIT
    assert long.endswith("...")


def test_render_news_and_team():
    news = render_news([
        Record(id="n1", title="We won", description="Award", extra={"company": "GDG", "location": "Pune"}),
    ])
    assert "**We won**" in news
    assert "GDG - Pune" in news
    assert render_news([]) == "No news found."

    team = render_team([
        Record(id="t1", title="Bo", extra={"role": "Member"}),
        Record(id="t2", title="Ada", extra={"role": "Lead", "isLead": True, "github": "https://github.com/ada"}),
    ])
    assert team.index("Ada") < team.index("Bo")
    assert "<https://github.com/ada>" in team
    assert render_team([]) == "No team members found."
