"""
Unit tests for the search, sort and display helpers.
"""
import pytest

from studio_dash.models import ChatRoom, Client, Note, Payment, Project, Submission, User
from studio_dash.services import filters
from studio_dash.services.display import NEUTRAL, badge_tables, status_badge
from studio_dash.services.ids import new_id, to_timestamp

pytestmark = pytest.mark.unit


def make_project(project_id, title, client_name, location, submissions=()):
    return Project(
        id=project_id, title=title, client_id="c1", client_name=client_name,
        location=location, description="desc", start_date="2024-01-01",
        submissions=list(submissions),
    )


def make_submission(submission_id, submitted_date=None):
    return Submission(
        id=submission_id, type="building-permit", authority="DBKL",
        submitted_date=submitted_date,
    )


def make_note(note_id, updated_at, pinned=False, category="general", title=None, content=""):
    return Note(
        id=note_id, title=title or f"Note {note_id}", content=content, category=category,
        created_by="1", created_at="2024-12-01T00:00:00Z", updated_at=updated_at,
        is_pinned=pinned,
    )


@pytest.fixture
def projects():
    return [
        make_project("1", "Luxury Villa", "Ahmad", "Damansara Heights, Kuala Lumpur"),
        make_project("2", "Office Fit-out", "Synergy Tech", "KLCC, Kuala Lumpur"),
        make_project("3", "Boutique Hotel", "Heritage Holdings", "George Town, Penang"),
    ]


class TestProjectSearch:

    def test_location_match_is_case_insensitive(self, projects):
        result = filters.filter_projects(projects, "kuala")
        assert [p.id for p in result] == ["1", "2"]

    def test_match_on_client_name(self, projects):
        assert [p.id for p in filters.filter_projects(projects, "HERITAGE")] == ["3"]

    def test_empty_query_returns_everything(self, projects):
        result = filters.filter_projects(projects, "")
        assert result == projects
        assert result is not projects

    def test_no_match(self, projects):
        assert filters.filter_projects(projects, "zzz") == []


class TestClientSearch:

    def test_missing_company_is_skipped(self):
        clients = [
            Client(id="c1", name="Ahmad", email="ahmad@email.com", phone="1", address="KL",
                   created_date="2024-01-10"),
            Client(id="c2", name="Sarah", email="sarah@synergy.com", phone="2", address="KL",
                   company="Synergy Tech", created_date="2024-02-10"),
        ]
        assert [c.id for c in filters.filter_clients(clients, "synergy")] == ["c2"]
        assert [c.id for c in filters.filter_clients(clients, "EMAIL.COM")] == ["c1"]


class TestNotes:

    def test_category_filter(self):
        notes = [
            make_note("n1", "2024-12-24T10:00:00Z", category="meeting"),
            make_note("n2", "2024-12-23T10:00:00Z", category="idea"),
        ]
        assert [n.id for n in filters.filter_notes(notes, category="idea")] == ["n2"]
        assert [n.id for n in filters.filter_notes(notes, category=filters.ALL)] == ["n1", "n2"]

    def test_query_after_category(self):
        notes = [
            make_note("n1", "2024-12-24T10:00:00Z", category="idea", content="Biophilic walls"),
            make_note("n2", "2024-12-23T10:00:00Z", category="meeting", content="biophilic review"),
        ]
        assert [n.id for n in filters.filter_notes(notes, "BIOPHILIC", "idea")] == ["n1"]

    def test_pinned_first_then_newest(self):
        notes = [
            make_note("n1", "2024-12-24T10:00:00Z"),
            make_note("n2", "2024-12-23T15:30:00Z"),
            make_note("n3", "2024-12-20T09:00:00Z", pinned=True),
        ]
        assert [n.id for n in filters.sort_notes(notes)] == ["n3", "n1", "n2"]

    def test_equal_keys_keep_input_order(self):
        notes = [
            make_note("a", "2024-12-24T10:00:00Z"),
            make_note("b", "2024-12-24T10:00:00Z"),
        ]
        assert [n.id for n in filters.sort_notes(notes)] == ["a", "b"]


class TestSubmissionTimeline:

    def test_undated_submissions_sort_last(self):
        submissions = [
            make_submission("s1"),
            make_submission("s2", "2024-03-01"),
            make_submission("s3", "2024-05-01"),
        ]
        result = filters.sort_submissions_by_date(submissions)
        assert [s.id for s in result] == ["s3", "s2", "s1"]

    def test_flatten_carries_project_context(self, projects):
        projects[0] = projects[0].model_copy(update={
            "submissions": [make_submission("s1", "2024-02-01")],
        })
        projects[2] = projects[2].model_copy(update={
            "submissions": [make_submission("s2", "2024-06-01")],
        })

        entries = filters.flatten_submissions(projects)

        assert [e.id for e in entries] == ["s2", "s1"]
        assert entries[0].project_id == "3"
        assert entries[0].project_title == "Boutique Hotel"
        assert entries[1].project_color == projects[0].color


class TestSmallFilters:

    def test_filter_payments_by_status(self):
        payments = [
            Payment(id="p1", project_id="1", description="a", status="paid"),
            Payment(id="p2", project_id="1", description="b", status="pending"),
        ]
        assert [p.id for p in filters.filter_payments(payments, "pending")] == ["p2"]
        assert len(filters.filter_payments(payments)) == 2

    def test_filter_rooms_and_online_users(self):
        rooms = [
            ChatRoom(id="room1", name="General Discussion", created_date="2024-01-01"),
            ChatRoom(id="room2", name="Villa Project", created_date="2024-01-15"),
        ]
        assert [r.id for r in filters.filter_rooms(rooms, "villa")] == ["room2"]

        users = [
            User(id="1", username="admin", full_name="Admin", email="a@x", is_online=True),
            User(id="2", username="sarah", full_name="Sarah", email="s@x"),
        ]
        assert [u.id for u in filters.online_users(users)] == ["1"]

    def test_find_by_id(self, projects):
        assert filters.find_by_id(projects, "2") is projects[1]
        assert filters.find_by_id(projects, "9") is None


class TestHelpers:

    def test_date_only_is_utc_midnight(self):
        assert to_timestamp("2024-01-01") == to_timestamp("2024-01-01T00:00:00Z")
        assert to_timestamp(None) == 0
        assert to_timestamp("not a date") == 0

    def test_new_id_skips_taken_values(self):
        first = new_id("x")
        second = new_id("x", {first})
        assert second != first
        assert second.startswith("x")


class TestDisplay:

    def test_known_badges(self):
        assert status_badge("payment-status", "overdue")["label"] == "Overdue"
        assert status_badge("project-status", "on-hold") == {"label": "On Hold", "color": "#64748b"}

    def test_unknown_values_fall_back(self):
        assert status_badge("project-status", "archived") == NEUTRAL
        assert status_badge("no-such-kind", "pending") == NEUTRAL

    def test_badge_tables_cover_every_kind(self):
        tables = badge_tables()
        assert set(tables) == {
            "project-status", "submission-status", "payment-status",
            "note-category", "note-priority", "submission-type",
        }
        assert tables["submission-type"]["fire-safety"]["label"] == "Fire Safety"
