"""
Demo studio data.

Builds the initial DashboardState used when the store has never been written.
Ledger totals are derived from the payments rather than typed in.
"""
from studio_dash.core.security import get_password_hash
from studio_dash.db.store import DashboardState
from studio_dash.models import (
    ChatMessage,
    ChatRoom,
    Client,
    FinanceRecord,
    Note,
    Payment,
    Project,
    ProjectDocument,
    Submission,
    User,
)
from studio_dash.services.aggregation import recompute_finance_record

# id, username, password, full name, email, role, online, last seen
DEMO_USERS = [
    ("1", "admin", "admin123", "Admin User", "admin@amsquareinteriors.com", "admin", True, None),
    ("2", "designer", "design123", "Sarah Designer", "sarah@amsquareinteriors.com", "designer", True, None),
    ("3", "manager", "manager123", "John Manager", "john@amsquareinteriors.com", "project-manager", False,
     "2024-12-24T18:30:00Z"),
    ("4", "finance", "finance123", "Emma Finance", "emma@amsquareinteriors.com", "finance", True, None),
]


def _users():
    return [
        User(
            id=user_id,
            username=username,
            password_hash=get_password_hash(password),
            full_name=full_name,
            email=email,
            role=role,
            is_online=online,
            last_seen=last_seen,
        )
        for user_id, username, password, full_name, email, role, online, last_seen in DEMO_USERS
    ]


def _clients():
    return [
        Client(
            id="c1", name="Mr. Ahmad bin Abdullah", email="ahmad.abdullah@email.com",
            phone="+60 12-345 6789", address="Damansara Heights, Kuala Lumpur",
            company="Private Individual",
            notes="Prefers modern minimalist design. Very detail-oriented.",
            project_ids=["1"], created_date="2024-01-10", total_spent=2500000,
        ),
        Client(
            id="c2", name="Synergy Holdings", email="contact@synergyholdings.com",
            phone="+60 3-2161 8888", address="KLCC, Kuala Lumpur",
            company="Synergy Holdings Sdn Bhd",
            notes="Corporate client. Requires green building certification.",
            project_ids=["2"], created_date="2024-01-20", total_spent=15000000,
        ),
        Client(
            id="c3", name="Heritage Hospitality Group", email="info@heritagehospitality.com",
            phone="+60 4-262 1234", address="Georgetown, Penang",
            company="Heritage Hospitality Group",
            notes="Specializes in boutique hotels. Values heritage preservation.",
            project_ids=["3"], created_date="2023-09-15", total_spent=5000000,
        ),
        Client(
            id="c4", name="Ms. Lisa Tan", email="lisa.tan@email.com",
            phone="+60 16-789 0123", address="Mont Kiara, Kuala Lumpur",
            notes="Looking for contemporary condo interior design.",
            project_ids=[], created_date="2024-12-01", total_spent=0,
        ),
    ]


def _projects():
    return [
        Project(
            id="1", title="Residential Villa - Damansara Heights",
            client_id="c1", client_name="Mr. Ahmad bin Abdullah",
            location="Damansara Heights, Kuala Lumpur",
            description="Modern 3-story residential villa with sustainable design features",
            status="submitted", start_date="2024-01-15", target_completion_date="2024-12-30",
            total_budget=2500000, color="#623443",
            submissions=[
                Submission(
                    id="s1", type="planning-permission", authority="DBKL - Kuala Lumpur City Hall",
                    submitted_date="2024-02-20", expected_approval_date="2024-04-20",
                    status="pending", consultant_fee=15000,
                    notes="Awaiting feedback on setback requirements",
                ),
                Submission(
                    id="s2", type="structural-approval", authority="JKR - Public Works Department",
                    submitted_date="2024-03-01", expected_approval_date="2024-04-15",
                    approval_date="2024-04-10", status="approved", consultant_fee=8000,
                ),
            ],
        ),
        Project(
            id="2", title="Commercial Office Building - KLCC",
            client_id="c2", client_name="Synergy Holdings Sdn Bhd",
            location="KLCC, Kuala Lumpur",
            description="12-story commercial office building with green building certification",
            status="design-development", start_date="2024-02-01", target_completion_date="2025-06-30",
            total_budget=15000000, color="#7a4356",
            submissions=[
                Submission(
                    id="s3", type="environmental-impact", authority="DOE - Department of Environment",
                    submitted_date="2024-03-15", expected_approval_date="2024-05-15",
                    status="resubmission-required", consultant_fee=25000,
                    notes="Need to revise drainage system design",
                ),
            ],
        ),
        Project(
            id="3", title="Boutique Hotel Renovation - Georgetown",
            client_id="c3", client_name="Heritage Hospitality Group",
            location="Georgetown, Penang",
            description="Heritage building conversion to 20-room boutique hotel",
            status="approved", start_date="2023-10-01", target_completion_date="2024-08-31",
            total_budget=5000000, color="#8a5366",
            submissions=[
                Submission(
                    id="s4", type="planning-permission", authority="MPPP - Penang Island City Council",
                    submitted_date="2023-11-10", expected_approval_date="2024-01-10",
                    approval_date="2024-01-05", status="approved", consultant_fee=12000,
                ),
                Submission(
                    id="s5", type="fire-safety", authority="Bomba - Fire Department",
                    submitted_date="2023-12-01", expected_approval_date="2024-02-01",
                    approval_date="2024-01-28", status="approved", consultant_fee=6000,
                ),
            ],
        ),
    ]


def _finance_records():
    ledgers = [
        ("f1", "1", "c1", [
            Payment(id="p1", project_id="1", type="deposit", description="Initial Deposit - 30%",
                    amount=750000, paid_amount=750000, status="paid", due_date="2024-01-20",
                    paid_date="2024-01-18", invoice_number="INV-2024-001"),
            Payment(id="p2", project_id="1", type="milestone", description="Design Phase Completion",
                    amount=750000, paid_amount=750000, status="paid", due_date="2024-03-15",
                    paid_date="2024-03-14", invoice_number="INV-2024-002"),
            Payment(id="p3", project_id="1", type="milestone", description="Construction Phase - 50%",
                    amount=1000000, paid_amount=0, status="pending", due_date="2024-07-15",
                    invoice_number="INV-2024-003"),
        ]),
        ("f2", "2", "c2", [
            Payment(id="p4", project_id="2", type="deposit", description="Project Deposit - 20%",
                    amount=3000000, paid_amount=3000000, status="paid", due_date="2024-02-10",
                    paid_date="2024-02-08", invoice_number="INV-2024-004"),
            Payment(id="p5", project_id="2", type="consultant-fee",
                    description="Environmental Impact Assessment",
                    amount=25000, paid_amount=25000, status="paid", due_date="2024-03-20",
                    paid_date="2024-03-19", invoice_number="INV-2024-005"),
            Payment(id="p6", project_id="2", type="milestone", description="Design Development Phase",
                    amount=4500000, paid_amount=1475000, status="partial", due_date="2024-05-30",
                    invoice_number="INV-2024-006",
                    notes="Partial payment received, balance pending"),
        ]),
        ("f3", "3", "c3", [
            Payment(id="p7", project_id="3", type="deposit", description="Initial Deposit",
                    amount=1500000, paid_amount=1500000, status="paid", due_date="2023-10-15",
                    paid_date="2023-10-12", invoice_number="INV-2023-045"),
            Payment(id="p8", project_id="3", type="final", description="Final Payment",
                    amount=3500000, paid_amount=3500000, status="paid", due_date="2024-08-31",
                    paid_date="2024-08-30", invoice_number="INV-2024-007"),
        ]),
    ]
    return [
        recompute_finance_record(
            FinanceRecord(id=record_id, project_id=project_id, client_id=client_id), payments
        )
        for record_id, project_id, client_id, payments in ledgers
    ]


def _message(message_id, user_id, username, text, timestamp):
    return ChatMessage(id=message_id, user_id=user_id, username=username,
                       message=text, timestamp=timestamp)


def _chat_rooms():
    return [
        ChatRoom(
            id="room1", name="General Team Chat", participants=["1", "2", "3", "4"],
            created_date="2024-01-01",
            messages=[
                _message("m1", "2", "Sarah Designer",
                         "Good morning team! Ready for today's design review?", "2024-12-25T09:15:00Z"),
                _message("m2", "1", "Admin User",
                         "Yes! Let's start with the Damansara Heights project.", "2024-12-25T09:16:30Z"),
                _message("m3", "4", "Emma Finance",
                         "Just a reminder - we have pending invoices for Project #2", "2024-12-25T09:20:00Z"),
                _message("m4", "2", "Sarah Designer",
                         "Noted! I'll follow up with the client this afternoon.", "2024-12-25T09:22:15Z"),
            ],
        ),
        ChatRoom(
            id="room2", name="Project: Damansara Villa", project_id="1",
            participants=["1", "2", "3"], created_date="2024-01-15",
            messages=[
                _message("m5", "3", "John Manager",
                         "The structural approval came through!", "2024-12-24T16:30:00Z"),
                _message("m6", "1", "Admin User",
                         "Excellent news! Let's schedule the next phase.", "2024-12-24T16:35:00Z"),
                _message("m7", "2", "Sarah Designer",
                         "I'll prepare the construction drawings this week.", "2024-12-25T08:45:00Z"),
            ],
        ),
        ChatRoom(
            id="room3", name="Project: KLCC Office", project_id="2",
            participants=["1", "2", "4"], created_date="2024-02-01",
            messages=[
                _message("m8", "4", "Emma Finance",
                         "Received partial payment for design phase.", "2024-12-25T10:00:00Z"),
                _message("m9", "1", "Admin User",
                         "Great! How much is still outstanding?", "2024-12-25T10:05:00Z"),
                _message("m10", "4", "Emma Finance",
                         "RM 3,025,000 balance remaining on the current milestone.", "2024-12-25T10:07:30Z"),
            ],
        ),
        ChatRoom(
            id="room4", name="Design Team", participants=["1", "2"], created_date="2024-01-01",
            messages=[
                _message("m11", "2", "Sarah Designer",
                         "Working on the new material palette for the Georgetown project.",
                         "2024-12-25T11:30:00Z"),
            ],
        ),
    ]


def _notes():
    return [
        Note(
            id="n1", title="Meeting with Mr. Ahmad",
            content="Discussed the kitchen layout and material selection for the island countertop. "
                    "He prefers marble over granite.",
            category="meeting", priority="high", project_id="1", created_by="1",
            created_at="2024-12-24T10:00:00Z", updated_at="2024-12-24T10:00:00Z", is_pinned=True,
        ),
        Note(
            id="n2", title="Lighting Concept Idea",
            content="Use hidden LED strips in the cove ceiling for the master bedroom to create "
                    "a warm ambient glow.",
            category="idea", priority="medium", created_by="2",
            created_at="2024-12-25T09:30:00Z", updated_at="2024-12-25T09:30:00Z",
        ),
        Note(
            id="n3", title="Supplier Follow-up",
            content="Call the tile supplier regarding the delivery schedule for the KLCC office "
                    "project. Invoice #INV-2024-005.",
            category="todo", priority="high", project_id="2", created_by="1",
            created_at="2024-12-25T11:00:00Z", updated_at="2024-12-25T11:00:00Z", is_pinned=True,
        ),
        Note(
            id="n4", title="Annual Team Lunch",
            content="Schedule the annual team lunch for next Friday. Location TBD.",
            category="general", priority="low", created_by="3",
            created_at="2024-12-20T14:00:00Z", updated_at="2024-12-20T14:00:00Z",
        ),
    ]


def _documents():
    return [
        ProjectDocument(id="d1", project_id="1", name="Concept Design Presentation.pdf", type="pdf",
                        size="15.4 MB", uploaded_by="2", uploaded_at="2024-11-15T14:30:00Z"),
        ProjectDocument(id="d2", project_id="1", name="Material Schedule v2.xlsx", type="excel",
                        size="2.1 MB", uploaded_by="2", uploaded_at="2024-11-20T09:15:00Z"),
        ProjectDocument(id="d3", project_id="1", name="Kitchen Layout Plan.pdf", type="pdf",
                        size="5.8 MB", uploaded_by="2", uploaded_at="2024-11-22T16:45:00Z"),
        ProjectDocument(id="d4", project_id="2", name="Mood Board - Reception Area.jpg", type="image",
                        size="4.2 MB", uploaded_by="2", uploaded_at="2024-12-01T11:20:00Z"),
        ProjectDocument(id="d5", project_id="2", name="Quotation - Furniture.pdf", type="pdf",
                        size="1.5 MB", uploaded_by="4", uploaded_at="2024-12-05T10:00:00Z"),
    ]


def demo_state() -> DashboardState:
    return DashboardState(
        projects=_projects(),
        clients=_clients(),
        finance_records=_finance_records(),
        chat_rooms=_chat_rooms(),
        notes=_notes(),
        documents=_documents(),
        users=_users(),
    )
