#!/usr/bin/env python3
"""
Credential store CLI: local (service, username, password) records.

Usage:
  python credstore_cli.py [dialog]
  python credstore_cli.py list
  python credstore_cli.py get <service>
  python credstore_cli.py init

Options:
  --path <file>    Store file path (default: ./passwords.json or CREDSTORE_PATH)
"""
import argparse
import sys
from pathlib import Path

# Allow running from repo root or from python/
sys.path.insert(0, str(Path(__file__).resolve().parent))

from credstore import EntryStore, StoreOpenError
from credstore.clipboard import ClipboardError, copy_to_clipboard
from credstore.dialog import Dialog
from credstore.store import DEFAULT_STORE_FILENAME


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Credential store CLI - plaintext local password records",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  dialog           Interactive menu (default)
  list             List services and usernames
  get <service>    Copy the password for a service to the clipboard
  init             Create an empty store file
        """,
    )
    parser.add_argument(
        "--path",
        default=None,
        help=f"Store file path (default: CREDSTORE_PATH or ./{DEFAULT_STORE_FILENAME})",
    )
    parser.add_argument(
        "command", nargs="?", default="dialog", choices=["dialog", "list", "get", "init"], help="Command"
    )
    parser.add_argument("args", nargs="*", help="Service name")
    return parser


def main(argv=None) -> int:
    parsed = build_parser().parse_args(argv)
    cmd = parsed.command
    args = parsed.args or []

    if cmd == "get" and not args:
        print("Usage: get <service>", file=sys.stderr)
        return 1

    try:
        store = EntryStore.open(parsed.path)
    except StoreOpenError as e:
        print(str(e), file=sys.stderr)
        return 1

    try:
        if cmd == "dialog":
            Dialog(store, sys.stdin, sys.stdout).run()

        elif cmd == "list":
            rows = sorted(store.list())
            if not rows:
                print("No entries saved yet.")
            for service, username in rows:
                print(f"Service: {service}, Username: {username}")

        elif cmd == "get":
            service = args[0]
            entry = store.get(service)
            if entry is None:
                print(f"Could not find an entry for service: {service}", file=sys.stderr)
                return 1
            try:
                copy_to_clipboard(entry.password)
            except ClipboardError as e:
                print(f"Clipboard unavailable: {e}", file=sys.stderr)
                return 1
            print(f"Found entry for {service} - password was copied to clipboard!")

        elif cmd == "init":
            print(f"Store ready: {store.get_path()} ({len(store)} entries)")

    except KeyboardInterrupt:
        print("\nAborted.")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
