import os
import sys
import tempfile
from pathlib import Path

# Ensure `python/` directory is on sys.path when running as a script.
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from credstore import Entry, EntryNotFoundError, EntryStore
from credstore.password import generate_password


def main() -> int:
    tmp_path = os.path.join(tempfile.gettempdir(), f"credstore-demo-{os.getpid()}.json")

    # ===== Store (all methods) =====
    store = EntryStore.open(tmp_path)
    print("[store] path:", store.get_path())
    print("[store] list (fresh):", store.list())

    store.add_and_persist(Entry("email", "bob", "abc123"))
    store.add_and_persist(Entry("github", "alice", generate_password()))
    print("[store] exists(email):", store.exists("email"))
    print("[store] list:", sorted(store.list()))

    store.update(Entry("email", "bob", "xyz999"))
    print("[store] get(email) password:", store.get("email").password)

    try:
        store.update(Entry("unknown", "x", "y"))
    except EntryNotFoundError as e:
        print("[store] update(unknown):", e)

    reopened = EntryStore.open(tmp_path)
    print("[store] reopened entries:", len(reopened))

    os.remove(tmp_path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
