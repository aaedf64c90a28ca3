# filevault

A small interactive, menu-driven file vault for several local users.
Each user logs in with a username and password, uploads files into the
vault, lists them in different orders, downloads them again and can
delete single files or the whole account.

Stored files are run-length encoded and then XOR-scrambled with a key
derived from the username. This keeps casual eyes off the contents but
is **not** strong encryption; do not rely on it to protect sensitive
data.

## Installation

```
pip install .
```

## Running

The program needs exactly one flag:

```
filevault -p    # production mode
filevault -d    # debugging mode
```

Debugging mode adds a "5. Display Users" entry to the main menu, which
lists every registered username with its password, and makes the About
page write a few test lines to standard error.

Any other argument list prints a short usage note and exits.

The vault works in the current directory and uses these locations:

| Path               | Purpose                                              |
|--------------------|------------------------------------------------------|
| `user_data`        | registered usernames and passwords                   |
| `file_data/`       | per-user list of stored files (name, type, size)     |
| `file_upload/`     | place a file here before uploading it                |
| `encrypted_files/` | compressed and scrambled copies of uploaded files    |
| `file_out/`        | downloaded files are restored here                   |

The session ends quietly when standard input runs out.

## Using the menus

Main menu:

1. Log in
2. Create a new user
3. About
4. Exit

New usernames must be 5 to 24 characters long, contain no spaces, tabs
or newlines and not be taken already. Passwords must be 5 to 24
characters long and hold at least one upper-case letter, one lower-case
letter and one digit (ASCII). New users are added to the front of the
user list and the list is saved at once.

After logging in:

1. Upload a file - give its name as `<name>.<type>` (at most 24
   characters); it is read from `file_upload/`. A file whose name has
   already been stored is refused.
2. Display the file list - by last added, by original size (largest
   first) or alphabetically (ignoring ASCII case). Pick a file by number
   to delete or download it; 0 goes back.
3. Delete the user - after a Y/N confirmation removes every stored file,
   the file list and the account, then ends the session.
4. Exit

## Library use

The building blocks are importable on their own, for example:

```python
from filevault.compression import rle_compress, rle_decompress
from filevault.encryption import generate_key, xor_bytes

key = generate_key("example_user")
packed = xor_bytes(rle_compress(b"aaaabbbc"), key)
restored = rle_decompress(xor_bytes(packed, key), 8)
assert restored == b"aaaabbbc"
```

- `filevault.compression`: `rle_compress`, `rle_decompress` (raises
  `CompressionError` on malformed or oversized data, pads short output
  with zero bytes) and `format_runs`.
- `filevault.encryption`: `generate_key`, `xor_user`, `xor_string`,
  `xor_bytes` and `get_permutation`. Keys are 24 printable characters;
  `generate_key` accepts usernames of 1 to 23 characters.
- `filevault.models`: the `User` and `FileRecord` dataclasses and the
  helpers `find_file`, `username_exists`, `format_users` and
  `format_file_list`.
- `filevault.sorting`: `quicksort` with a comparison function,
  `compare_file_name`, `compare_file_size`, `sort_by_name`,
  `sort_by_size` and `to_lowercase`.
- `filevault.storage.Storage`: reads and writes the vault's on-disk
  files under a chosen root directory.
- `filevault.vault`: `upload_file`, `delete_file`, `download_file` and
  `remove_user`, raising `VaultError` when an operation cannot be done.
- `filevault.login`: `validate_username` and `validate_password`
  (raising `ValidationError`), `authenticate`, and the interactive
  `user_login` and `user_add`.
- `filevault.console.Console`: the line-oriented input reader used by
  the menus; it takes any text streams, which makes the menus scriptable.

## What it does not do

- Passwords are kept unhashed in `user_data`, and names in the vault's
  files are limited to 24 bytes.
- The XOR scrambling is obfuscation only; there is no real encryption
  and no integrity check of stored files.

## Tests

```
pip install .[test]
pytest
```