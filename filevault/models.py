"""Records for users and stored files, and helpers over lists of them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

MAX_NAME_SIZE = 25


@dataclass
class FileRecord:
    """A file kept in the vault.

    ``name``, ``type`` and ``file_size`` are persisted; ``encrypted_name``
    is derived from the owner's key when the record is loaded.
    """

    name: str
    type: str
    file_size: int = 0
    encrypted_name: str = ""

    def display_name(self) -> str:
        """Return the name as ``<name>.<type>``."""
        return f"{self.name}.{self.type}"


@dataclass
class User:
    """An account. Only ``username`` and ``password`` are persisted."""

    username: str
    password: str
    files: list[FileRecord] = field(default_factory=list)
    key: str = ""


def find_file(files: list[FileRecord], name: str) -> FileRecord:
    """Return the first record whose name equals ``name``.

    Raises LookupError when the list is empty or nothing matches.
    """
    if not files:
        raise LookupError("file list is empty")
    for record in files:
        if record.name == name:
            return record
    raise LookupError(f"no file named {name!r}")


def username_exists(users: Iterable[User], username: str) -> bool:
    """Tell whether any user has exactly this username."""
    return any(user.username == username for user in users)


def format_users(users: Iterable[User]) -> str:
    """Render the numbered list of usernames and passwords."""
    return "".join(
        f"{number}. \nUsername: {user.username}\nPassword: {user.password}\n"
        for number, user in enumerate(users, start=1)
    )


def format_file_list(files: Iterable[FileRecord]) -> str:
    """Render the numbered list of file names."""
    return "".join(
        f"{number}.  File Name: {record.display_name()}\n"
        for number, record in enumerate(files, start=1)
    )