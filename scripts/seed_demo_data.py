import sys
import os

# Add current directory to path
sys.path.append(os.getcwd())

from studio_dash.db.session import engine
from studio_dash.db.seed import DEMO_USERS, demo_state
from studio_dash.db.store import StateStore, COLLECTION_TYPES


def seed_demo_data():
    print("--- Demo Data Seeding ---")

    store = StateStore(engine)
    state = store.reset(demo_state())

    for name in COLLECTION_TYPES:
        print(f"{name}: {len(getattr(state, name))} records")

    print("Demo data written successfully!")
    print("Sign in with one of:")
    for _, username, password, full_name, _, role, _, _ in DEMO_USERS:
        print(f"  {username} / {password}  ({full_name}, {role})")


if __name__ == "__main__":
    seed_demo_data()
