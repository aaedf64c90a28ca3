import pytest

from filevault.compression import rle_decompress
from filevault.encryption import generate_key, xor_bytes, xor_string
from filevault.models import MAX_NAME_SIZE, FileRecord, User
from filevault.storage import Storage


def _user(name="alice01"):
    user = User(name, "password")
    user.key = generate_key(name)
    return user


def test_load_users_without_file_is_empty(tmp_path):
    assert Storage(tmp_path).load_users() == []


def test_users_round_trip(tmp_path):
    storage = Storage(tmp_path)
    users = [User("alice01", "password"), User("bobby22", "secret")]
    storage.save_users(users)
    loaded = storage.load_users()
    assert [(u.username, u.password) for u in loaded] == [
        ("alice01", "password"),
        ("bobby22", "secret"),
    ]
    assert all(u.files == [] for u in loaded)


def test_user_file_layout_size(tmp_path):
    storage = Storage(tmp_path)
    storage.save_users([User("alice01", "password"), User("bobby22", "secret")])
    assert storage.users_path.stat().st_size == 2 * 2 * MAX_NAME_SIZE


def test_save_empty_users_removes_file(tmp_path):
    storage = Storage(tmp_path)
    storage.save_users([User("alice01", "password")])
    storage.save_users([])
    assert not storage.users_path.exists()


def test_save_users_rejects_long_name(tmp_path):
    with pytest.raises(ValueError):
        Storage(tmp_path).save_users([User("x" * MAX_NAME_SIZE, "password")])


def test_user_data_path_uses_scrambled_name(tmp_path):
    storage = Storage(tmp_path)
    user = _user()
    assert storage.user_data_path(user) == tmp_path / "file_data" / xor_string(user.username, user.key)


def test_user_files_round_trip(tmp_path):
    storage = Storage(tmp_path)
    user = _user()
    user.files = [FileRecord("photo", "bmp", 1234), FileRecord("notes", "txt", 0)]
    storage.save_user_files(user)
    assert storage.user_data_path(user).stat().st_size == 2 * (2 * MAX_NAME_SIZE + 8)

    fresh = _user()
    loaded = storage.load_user_files(fresh)
    assert loaded is fresh.files
    assert [(r.name, r.type, r.file_size) for r in loaded] == [
        ("photo", "bmp", 1234),
        ("notes", "txt", 0),
    ]
    assert all(r.encrypted_name == xor_string(r.name, fresh.key) for r in loaded)


def test_load_user_files_without_file_keeps_list(tmp_path):
    user = _user()
    assert Storage(tmp_path).load_user_files(user) == []


def test_save_empty_user_files_removes_file(tmp_path):
    storage = Storage(tmp_path)
    user = _user()
    user.files = [FileRecord("photo", "bmp", 3)]
    storage.save_user_files(user)
    user.files = []
    storage.save_user_files(user)
    assert not storage.user_data_path(user).exists()


def test_paths(tmp_path):
    storage = Storage(tmp_path)
    record = FileRecord("photo", "bmp", 3, encrypted_name="scrambled")
    assert storage.encrypted_path(record) == tmp_path / "encrypted_files" / "scrambled"
    assert storage.upload_path("photo.bmp") == tmp_path / "file_upload" / "photo.bmp"
    assert storage.output_path(record) == tmp_path / "file_out" / "photo.bmp"


def test_store_protected_file_round_trip(tmp_path):
    storage = Storage(tmp_path)
    key = generate_key("alice01")
    source = tmp_path / "file_upload" / "photo.bmp"
    source.parent.mkdir()
    content = b"\x00" * 600 + b"abcabc" + b"\xff" * 3
    source.write_bytes(content)
    dest = tmp_path / "encrypted_files" / "scrambled"

    size = storage.store_protected_file(dest, source, key)

    assert size == len(content)
    stored = dest.read_bytes()
    assert stored != content
    assert rle_decompress(xor_bytes(stored, key), size) == content


def test_store_protected_file_missing_source(tmp_path):
    with pytest.raises(FileNotFoundError):
        Storage(tmp_path).store_protected_file(
            tmp_path / "out", tmp_path / "missing", generate_key("alice01")
        )