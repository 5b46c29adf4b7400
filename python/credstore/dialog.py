"""Interactive menu loop driving an entry store.

Reads commands line by line from ``reader`` and writes prompts and results to
``writer``. Passwords are read through ``prompt_password`` (getpass by default)
so they are not echoed.
"""

from __future__ import annotations

import getpass
from typing import Callable, TextIO

from common.logger import get_logger
from credstore.base import EntryStoreBase
from credstore.clipboard import ClipboardError, copy_to_clipboard
from credstore.entry import Entry
from credstore.errors import EntryNotFoundError, PersistError
from credstore.password import generate_password

MAIN_MENU = (
    "\nCommands:\n"
    "[1] -> Add password\n"
    "[2] -> Get password\n"
    "[3] -> Update service\n"
    "[4] -> List services\n"
    "[q] -> Quit\n"
)

ADD_MENU = (
    "\nOptions:\n"
    "[1] -> Generate password\n"
    "[2] -> Enter password\n"
)

UPDATE_MENU = (
    "[1] -> Update username\n"
    "[2] -> Update password\n"
)


class PasswordMismatch(Exception):
    pass


class Dialog:
    def __init__(
        self,
        store: EntryStoreBase,
        reader: TextIO,
        writer: TextIO,
        prompt_password: Callable[[str], str] = getpass.getpass,
        copy: Callable[[str], None] = copy_to_clipboard,
    ):
        self.store = store
        self.reader = reader
        self.writer = writer
        self.prompt_password = prompt_password
        self.copy = copy

    # ---------- terminal io ----------

    def print(self, message: str) -> None:
        self.writer.write(message + "\n")
        self.writer.flush()

    def read_line(self, prompt: str = "") -> str:
        """Read one trimmed line. Raises EOFError at end of input."""
        if prompt:
            self.writer.write(prompt)
            self.writer.flush()
        line = self.reader.readline()
        if not line:
            raise EOFError
        return line.strip()

    # ---------- main loop ----------

    def run(self) -> None:
        self.print("Welcome to the password manager!")
        handlers = {
            "1": self.handle_add, "add": self.handle_add,
            "2": self.handle_get, "get": self.handle_get,
            "3": self.handle_update, "update": self.handle_update,
            "4": self.handle_list, "list": self.handle_list,
        }
        while True:
            self.print(MAIN_MENU)
            try:
                command = self.read_line().lower()
            except EOFError:
                break
            if command in ("q", "quit", "exit"):
                break
            handler = handlers.get(command)
            if handler is None:
                self.print("Invalid command")
                continue
            try:
                handler()
            except EOFError:
                break
        self.print("Bye!")

    # ---------- add ----------

    def read_service_name(self) -> str:
        """Ask until the user gives a non-empty service name not yet stored."""
        while True:
            service = self.read_line("Enter service name: ")
            if not service:
                self.print("Service name cannot be empty")
            elif self.store.exists(service):
                self.print("This service already exists, please try again with a unique service name")
            else:
                return service

    def read_and_confirm_password(self) -> str:
        while True:
            password = self.prompt_password("Enter password: ")
            if password == self.prompt_password("Please verify password: "):
                return password
            self.print("Unfortunately the entered passwords did not match, please try again")

    def handle_add(self) -> None:
        self.print(ADD_MENU)
        choice = self.read_line().lower()
        if choice in ("1", "generate"):
            generate = True
        elif choice in ("2", "enter"):
            generate = False
        else:
            self.print("Invalid command")
            return

        service = self.read_service_name()
        username = self.read_line("Enter username: ")
        password = generate_password() if generate else self.read_and_confirm_password()
        self._save(Entry(service, username, password))

    def _save(self, entry: Entry) -> None:
        try:
            self.store.add_and_persist(entry)
        except PersistError as exc:
            get_logger(__name__).warning("dialog: save failed service=%s", entry.service)
            self.print(f"Could not save entry for {entry.service}: {exc}")
            return
        self.print(f"Password entry for {entry.service} was successfully saved")

    # ---------- get ----------

    def handle_get(self) -> None:
        service = self.read_line("Enter service name: ")
        entry = self.store.get(service)
        if entry is None:
            self.print(f"Could not find an entry for service: {service}")
            return
        try:
            self.copy(entry.password)
        except ClipboardError as exc:
            self.print(f"Found entry for {service}, but the clipboard is unavailable: {exc}")
            return
        self.print(f"Found entry for {service} - password was copied to clipboard!")

    # ---------- update ----------

    def handle_update(self) -> None:
        service = self.read_line("Which service would you like to update?\n")
        entry = self.store.get(service)
        if entry is None:
            self.print(f"Could not find an entry for service: {service}")
            return

        self.print(f"\nUpdating service: {service}. These are your options:\n{UPDATE_MENU}")
        choice = self.read_line().lower()
        try:
            if choice in ("1", "username"):
                updated = entry.with_username(self.read_line("Enter new username: "))
            elif choice in ("2", "password"):
                updated = entry.with_password(self._read_new_password())
            else:
                self.print("Invalid command")
                return
        except PasswordMismatch:
            self.print("Unfortunately the entered passwords did not match, please try again")
            return

        try:
            self.store.update(updated)
        except EntryNotFoundError:
            self.print(f"Could not find an entry for service: {service}")
        except PersistError as exc:
            self.print(f"Could not update entry for {service}: {exc}")
        else:
            self.print(f"Service {service} was updated")

    def _read_new_password(self) -> str:
        password = self.prompt_password("Enter new password: ")
        if password != self.prompt_password("Please verify password: "):
            raise PasswordMismatch()
        return password

    # ---------- list ----------

    def handle_list(self) -> None:
        rows = sorted(self.store.list())
        if not rows:
            self.print("No entries saved yet.")
            return
        for service, username in rows:
            self.print(f"Service: {service}, Username: {username}")
