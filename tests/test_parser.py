import logging
from datetime import datetime, timezone

import pytest

from community_site.exceptions import ParseError
from community_site.normalizer import to_record, to_records
from community_site.parser import parse_document


def test_parse_event_document():
    doc = {
        "_id": "65a1f0",
        "title": "  DevFest  ",
        "date": "2024-01-10T09:30:00.000Z",
        "description": "Annual meetup",
        "image": "https://img.example/devfest.png",
        "link": "https://devfest.example",
        "status": "past",
        "__v": 0,
    }
    parsed = parse_document(doc)

    assert parsed["id"] == "65a1f0"
    assert parsed["title"] == "DevFest"
    assert parsed["date"] == datetime(2024, 1, 10, 9, 30, tzinfo=timezone.utc)
    assert parsed["status"] == "past"
    assert parsed["extra"] == {
        "image": "https://img.example/devfest.png",
        "link": "https://devfest.example",
    }


def test_team_member_name_becomes_title():
    record = to_record(parse_document({"_id": "t1", "name": "Ada", "role": "Lead", "isLead": True}))

    assert record.title == "Ada"
    assert record.date is None
    assert record.status is None
    assert record.extra == {"role": "Lead", "isLead": True}


def test_date_only_and_offset_dates_are_utc():
    assert parse_document({"id": "x", "date": "2024-03-05"})["date"] == datetime(
        2024, 3, 5, tzinfo=timezone.utc
    )
    assert parse_document({"id": "x", "date": "2024-03-05T02:00:00+02:00"})["date"] == datetime(
        2024, 3, 5, 0, 0, tzinfo=timezone.utc
    )


def test_missing_date_is_none():
    assert parse_document({"id": "x", "date": None})["date"] is None
    assert parse_document({"id": "x"})["date"] is None


@pytest.mark.parametrize(
    "doc",
    [
        "not an object",
        {"title": "no id"},
        {"id": "x", "date": "next tuesday"},
        {"id": "x", "date": 12.5},
        {"id": "x", "status": 3},
    ],
)
def test_bad_documents_raise_parse_error(doc):
    with pytest.raises(ParseError):
        parse_document(doc)


def test_unknown_status_is_kept_verbatim():
    assert to_record(parse_document({"id": "x", "status": "archived"})).status == "archived"


def test_to_records_requires_array():
    with pytest.raises(ParseError):
        to_records({"events": []})
    assert to_records([]) == []


def test_unusable_date_is_logged_with_document_id(caplog):
    with caplog.at_level(logging.WARNING, logger="community_site.parser"):
        with pytest.raises(ParseError):
            parse_document({"_id": "evt-42", "date": "someday"})

    assert "evt-42" in caplog.text
    assert "someday" in caplog.text
