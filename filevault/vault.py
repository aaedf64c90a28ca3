"""Operations on a logged-in user's protected files."""

from __future__ import annotations

import re
from pathlib import Path

from .compression import rle_decompress
from .encryption import xor_bytes, xor_string
from .models import FileRecord, User
from .storage import Storage


class VaultError(Exception):
    """Raised when a vault operation cannot be carried out."""


def _split_name(file_name: str) -> tuple[str, str]:
    name, _, rest = file_name.lstrip(".").partition(".")
    type_parts = [part for part in re.split(r"[ .,]+", rest) if part]
    if not name or not type_parts:
        raise VaultError(
            f"file name must be in the form <file_name>.<file_type>: {file_name!r}"
        )
    return name, type_parts[0]


def upload_file(storage: Storage, user: User, file_name: str) -> FileRecord:
    """Protect the file ``file_name`` from the upload directory for ``user``.

    The new record is put at the front of ``user.files`` and returned.
    Raises VaultError if the file is missing, badly named, or already stored.
    """
    source = storage.upload_path(file_name)
    if not source.is_file():
        raise VaultError(f"Can't find file! File path: {source}")
    file_size = source.stat().st_size

    name, file_type = _split_name(file_name)
    record = FileRecord(name, file_type, file_size, xor_string(name, user.key))

    dest = storage.encrypted_path(record)
    if dest.exists():
        raise VaultError("File already uploaded.")

    storage.store_protected_file(dest, source, user.key)
    user.files.insert(0, record)
    return record


def delete_file(storage: Storage, user: User, record: FileRecord) -> None:
    """Remove the protected contents of ``record`` and drop it from ``user.files``."""
    storage.encrypted_path(record).unlink(missing_ok=True)
    user.files[:] = [item for item in user.files if item is not record]


def download_file(storage: Storage, record: FileRecord, key: str) -> Path:
    """Restore ``record`` into the output directory and return its path."""
    source = storage.encrypted_path(record)
    try:
        protected = source.read_bytes()
    except FileNotFoundError as exc:
        raise VaultError(f"failure opening {source}") from exc
    data = rle_decompress(xor_bytes(protected, key), record.file_size)
    dest = storage.output_path(record)
    dest.parent.mkdir(parents=True, exist_ok=True)
    dest.write_bytes(data)
    return dest


def remove_user(storage: Storage, user: User, users: list[User]) -> None:
    """Delete all of ``user``'s files and data, and the account itself."""
    for record in list(user.files):
        delete_file(storage, user, record)
    storage.user_data_path(user).unlink(missing_ok=True)
    for index, account in enumerate(users):
        if account.username == user.username:
            del users[index]
            break
    storage.save_users(users)