"""
Unit tests for the mutation handlers.
"""
import pytest
from pydantic import ValidationError

from studio_dash.models import (
    ChatMessage,
    ChatRoom,
    Client,
    ClientCreate,
    ClientUpdate,
    FinanceRecord,
    Note,
    NoteCreate,
    NoteUpdate,
    PaymentCreate,
    PaymentUpdate,
    Project,
    ProjectCreate,
    ProjectUpdate,
    SubmissionCreate,
    SubmissionUpdate,
    User,
)
from studio_dash.services import mutations

pytestmark = pytest.mark.unit


def empty_ledgers():
    return [
        FinanceRecord(id="f1", project_id="1", client_id="c1"),
        FinanceRecord(id="f2", project_id="2", client_id="c2"),
    ]


def make_client(client_id="c1", name="Ahmad"):
    return Client(
        id=client_id, name=name, email="ahmad@email.com", phone="+60 12", address="KL",
        created_date="2024-01-10", total_spent=2500,
    )


def make_note(note_id, updated_at="2024-12-24T10:00:00Z", pinned=False):
    return Note(
        id=note_id, title=f"Note {note_id}", content="content", created_by="1",
        created_at="2024-12-20T10:00:00Z", updated_at=updated_at, is_pinned=pinned,
    )


def make_room(room_id, messages=()):
    return ChatRoom(id=room_id, name=f"Room {room_id}", messages=list(messages),
                    participants=["1"], created_date="2024-01-01")


def make_project(project_id="1"):
    return Project(
        id=project_id, title="Villa", client_id="c1", client_name="Ahmad",
        location="Damansara Heights", description="Villa", start_date="2024-01-15",
    )


class TestPayments:

    def test_two_payments_reconcile(self):
        records = empty_ledgers()
        records = mutations.add_payment(
            records, "1", PaymentCreate(description="Deposit", amount=100, paid_amount=100, status="paid")
        )
        records = mutations.add_payment(
            records, "1", PaymentCreate(description="Milestone", amount=50, paid_amount=0)
        )

        ledger = records[0]
        assert len(ledger.payments) == 2
        assert ledger.total_amount == 150
        assert ledger.paid_amount == 100
        assert ledger.balance == 50

    def test_add_payment_assigns_project_and_unique_ids(self):
        records = empty_ledgers()
        for i in range(5):
            records = mutations.add_payment(records, "1", PaymentCreate(description=f"#{i}", amount=1))

        payments = records[0].payments
        assert all(p.project_id == "1" for p in payments)
        assert len({p.id for p in payments}) == 5

    def test_add_payment_preserves_other_records(self):
        records = empty_ledgers()
        updated = mutations.add_payment(records, "1", PaymentCreate(description="Deposit", amount=10))
        assert updated is not records
        assert updated[1] is records[1]
        assert records[0].payments == []

    def test_add_payment_unknown_project_is_noop(self):
        records = empty_ledgers()
        assert mutations.add_payment(records, "404", PaymentCreate(description="x")) is records

    def test_update_payment_merges_and_recomputes(self):
        records = mutations.add_payment(
            empty_ledgers(), "1",
            PaymentCreate(description="Milestone", amount=400, paid_amount=0, invoice_number="INV-1"),
        )
        payment_id = records[0].payments[0].id

        updated = mutations.update_payment(
            records, "1", payment_id, PaymentUpdate(paid_amount=150, status="partial")
        )

        payment = updated[0].payments[0]
        assert payment.paid_amount == 150
        assert payment.status == "partial"
        assert payment.invoice_number == "INV-1"
        assert payment.amount == 400
        assert updated[0].paid_amount == 150
        assert updated[0].balance == 250
        assert updated[1] is records[1]

    def test_update_payment_status_is_not_validated(self):
        records = mutations.add_payment(
            empty_ledgers(), "1", PaymentCreate(description="Final", amount=400, paid_amount=10)
        )
        payment_id = records[0].payments[0].id
        updated = mutations.update_payment(records, "1", payment_id, PaymentUpdate(status="paid"))
        assert updated[0].payments[0].status == "paid"
        assert updated[0].balance == 390

    def test_update_unknown_payment_returns_input(self):
        records = mutations.add_payment(
            empty_ledgers(), "1", PaymentCreate(description="Deposit", amount=100)
        )
        assert mutations.update_payment(records, "1", "nope", PaymentUpdate(amount=1)) is records
        assert mutations.update_payment(records, "404", "nope", PaymentUpdate(amount=1)) is records

    def test_open_finance_record_once(self):
        records = empty_ledgers()
        project = make_project("3")

        opened = mutations.open_finance_record(records, project)
        assert len(opened) == 3
        assert opened[-1].project_id == "3"
        assert opened[-1].total_amount == 0
        assert mutations.open_finance_record(opened, project) is opened


class TestClients:

    def test_add_client_assigns_server_fields(self):
        clients = [make_client()]
        client_in = ClientCreate(name="Lisa Tan", email="lisa@email.com", phone="+60 16", address="Mont Kiara")

        updated = mutations.add_client(clients, client_in)

        new_client = updated[-1]
        assert len(updated) == 2
        assert new_client.id != "c1"
        assert new_client.total_spent == 0
        assert new_client.created_date
        assert new_client.project_ids == []

    def test_update_client_keeps_unset_fields(self):
        clients = [make_client(), make_client("c2", "Synergy")]
        updated = mutations.update_client(clients, "c1", ClientUpdate(phone="+60 99"))
        assert updated[0].phone == "+60 99"
        assert updated[0].name == "Ahmad"
        assert updated[0].total_spent == 2500
        assert updated[1] is clients[1]

    def test_update_unknown_client_is_noop(self):
        clients = [make_client()]
        assert mutations.update_client(clients, "c9", ClientUpdate(name="x")) is clients

    def test_delete_client(self):
        clients = [make_client(), make_client("c2", "Synergy")]
        assert [c.id for c in mutations.delete_client(clients, "c1")] == ["c2"]
        assert mutations.delete_client(clients, "c9") is clients


class TestNotes:

    def test_add_note_stamps_author_and_times(self):
        notes = mutations.add_note([], NoteCreate(title="Idea", content="LED cove"), "2")
        note = notes[0]
        assert note.created_by == "2"
        assert note.created_at == note.updated_at
        assert note.is_pinned is False

    def test_update_note_does_not_bump_updated_at(self):
        notes = [make_note("n1")]
        updated = mutations.update_note(notes, "n1", NoteUpdate(is_pinned=True))
        assert updated[0].is_pinned is True
        assert updated[0].updated_at == "2024-12-24T10:00:00Z"

    def test_update_note_with_explicit_updated_at(self):
        notes = [make_note("n1")]
        updated = mutations.update_note(
            notes, "n1", NoteUpdate(title="Renamed", updated_at="2024-12-26T00:00:00Z")
        )
        assert updated[0].title == "Renamed"
        assert updated[0].updated_at == "2024-12-26T00:00:00Z"

    def test_update_note_rejects_null_title(self):
        notes = [make_note("n1")]
        with pytest.raises(ValidationError):
            mutations.update_note(notes, "n1", NoteUpdate.model_construct(title=None))
        assert notes[0].title == "Note n1"

    def test_missing_note_is_noop(self):
        notes = [make_note("n1")]
        assert mutations.update_note(notes, "n9", NoteUpdate(title="x")) is notes
        assert mutations.delete_note(notes, "n9") is notes
        assert mutations.delete_note(notes, "n1") == []


class TestChat:

    def test_whitespace_message_is_dropped(self):
        rooms = [make_room("room1")]
        updated = mutations.send_message(rooms, "room1", "1", "Admin User", "   ")
        assert updated is rooms
        assert len(updated[0].messages) == 0

    def test_send_message_appends_trimmed_text(self):
        existing = ChatMessage(id="m1", user_id="2", username="Sarah", message="Hi",
                               timestamp="2024-12-25T09:15:00Z")
        rooms = [make_room("room1", [existing]), make_room("room2")]

        updated = mutations.send_message(rooms, "room1", "1", "Admin User", "  Hello team  ")

        messages = updated[0].messages
        assert len(messages) == 2
        assert messages[0] is existing
        assert messages[1].message == "Hello team"
        assert messages[1].user_id == "1"
        assert messages[1].username == "Admin User"
        assert messages[1].id != "m1"
        assert updated[1] is rooms[1]
        assert rooms[0].messages == [existing]

    def test_unknown_room_is_noop(self):
        rooms = [make_room("room1")]
        assert mutations.send_message(rooms, "room9", "1", "Admin", "hello") is rooms


class TestProjects:

    def test_add_project_copies_client_name(self):
        clients = [make_client()]
        project_in = ProjectCreate(
            title="Condo", client_id="c1", location="Mont Kiara",
            description="Condo interior", start_date="2025-01-01",
        )
        projects = mutations.add_project([], project_in, clients)
        assert projects[0].client_name == "Ahmad"
        assert projects[0].submissions == []
        assert projects[0].status == "concept"

    def test_add_project_unknown_client_is_noop(self):
        projects = [make_project()]
        project_in = ProjectCreate(
            title="Condo", client_id="c9", location="Mont Kiara",
            description="Condo interior", start_date="2025-01-01",
        )
        assert mutations.add_project(projects, project_in, [make_client()]) is projects

    def test_update_project(self):
        projects = [make_project()]
        updated = mutations.update_project(projects, "1", ProjectUpdate(status="on-hold"))
        assert updated[0].status == "on-hold"
        assert updated[0].title == "Villa"

    def test_submission_status_transitions_are_free_form(self):
        projects = mutations.add_submission(
            [make_project()], "1",
            SubmissionCreate(type="fire-safety", authority="Bomba", consultant_fee=6000, status="approved"),
        )
        submission_id = projects[0].submissions[0].id

        reverted = mutations.update_submission(
            projects, "1", submission_id, SubmissionUpdate(status="pending")
        )
        assert reverted[0].submissions[0].status == "pending"
        assert reverted[0].submissions[0].consultant_fee == 6000

    def test_update_missing_submission_is_noop(self):
        projects = [make_project()]
        assert mutations.update_submission(projects, "1", "s9", SubmissionUpdate(status="approved")) is projects
        assert mutations.add_submission(
            projects, "9", SubmissionCreate(type="other", authority="x")
        ) is projects


class TestPresence:

    def test_going_offline_stamps_last_seen(self):
        users = [User(id="1", username="admin", full_name="Admin User", email="a@b.c", is_online=True)]
        updated = mutations.set_user_presence(users, "1", False, now="2024-12-25T18:00:00Z")
        assert updated[0].is_online is False
        assert updated[0].last_seen == "2024-12-25T18:00:00Z"

        back = mutations.set_user_presence(updated, "1", True)
        assert back[0].is_online is True
        assert back[0].last_seen == "2024-12-25T18:00:00Z"
