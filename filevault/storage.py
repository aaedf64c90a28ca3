"""On-disk layout: user accounts, per-user file lists and protected files."""

from __future__ import annotations

import struct
from pathlib import Path

from .compression import rle_compress
from .encryption import xor_bytes, xor_string
from .models import MAX_NAME_SIZE, FileRecord, User

_NAME = f"{MAX_NAME_SIZE}s"
_USER = struct.Struct(f"<{_NAME}{_NAME}")
_RECORD = struct.Struct(f"<{_NAME}{_NAME}Q")


def _pack_name(text: str) -> bytes:
    raw = text.encode("utf-8")
    if len(raw) > MAX_NAME_SIZE - 1:
        raise ValueError(f"name longer than {MAX_NAME_SIZE - 1} bytes: {text!r}")
    return raw


def _unpack_name(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def _records(data: bytes, layout: struct.Struct):
    whole = len(data) // layout.size * layout.size
    return layout.iter_unpack(data[:whole])


class Storage:
    """The directory tree that holds all vault data under ``root``."""

    def __init__(self, root: str | Path = ".") -> None:
        self.root = Path(root)
        self.users_path = self.root / "user_data"
        self.file_data_dir = self.root / "file_data"
        self.encrypted_dir = self.root / "encrypted_files"
        self.upload_dir = self.root / "file_upload"
        self.output_dir = self.root / "file_out"

    def load_users(self) -> list[User]:
        """Read all saved accounts; an absent user file means no accounts."""
        try:
            data = self.users_path.read_bytes()
        except FileNotFoundError:
            return []
        return [
            User(_unpack_name(username), _unpack_name(password))
            for username, password in _records(data, _USER)
        ]

    def save_users(self, users: list[User]) -> None:
        """Replace the saved accounts; an empty list deletes the user file."""
        if not users:
            self.users_path.unlink(missing_ok=True)
            return
        data = b"".join(
            _USER.pack(_pack_name(user.username), _pack_name(user.password))
            for user in users
        )
        self.users_path.parent.mkdir(parents=True, exist_ok=True)
        self.users_path.write_bytes(data)

    def user_data_path(self, user: User) -> Path:
        """Return where the list of ``user``'s files is kept."""
        return self.file_data_dir / xor_string(user.username, user.key)

    def load_user_files(self, user: User) -> list[FileRecord]:
        """Append ``user``'s saved file records to ``user.files`` and return it."""
        try:
            data = self.user_data_path(user).read_bytes()
        except FileNotFoundError:
            return user.files
        for name, file_type, size in _records(data, _RECORD):
            record = FileRecord(_unpack_name(name), _unpack_name(file_type), size)
            record.encrypted_name = xor_string(record.name, user.key)
            user.files.append(record)
        return user.files

    def save_user_files(self, user: User) -> None:
        """Replace ``user``'s saved file list; an empty list deletes it."""
        path = self.user_data_path(user)
        if not user.files:
            path.unlink(missing_ok=True)
            return
        data = b"".join(
            _RECORD.pack(_pack_name(r.name), _pack_name(r.type), r.file_size)
            for r in user.files
        )
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)

    def encrypted_path(self, record: FileRecord) -> Path:
        """Return where the protected contents of ``record`` are kept."""
        return self.encrypted_dir / record.encrypted_name

    def upload_path(self, name: str) -> Path:
        """Return where a file named ``name`` is picked up for upload."""
        return self.upload_dir / name

    def output_path(self, record: FileRecord) -> Path:
        """Return where ``record`` is written when downloaded."""
        return self.output_dir / record.display_name()

    def store_protected_file(self, dest: str | Path, source: str | Path, key: str) -> int:
        """Compress and encrypt ``source`` into ``dest``; return the source size."""
        data = Path(source).read_bytes()
        protected = xor_bytes(rle_compress(data), key)
        dest_path = Path(dest)
        dest_path.parent.mkdir(parents=True, exist_ok=True)
        dest_path.write_bytes(protected)
        return len(data)