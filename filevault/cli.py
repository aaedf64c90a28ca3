"""Interactive menus of the file vault and the command that starts them."""

from __future__ import annotations

import sys

from .compression import CompressionError
from .console import Console
from .encryption import generate_key
from .login import print_about, print_menu, user_add, user_login
from .models import MAX_NAME_SIZE, FileRecord, User, find_file, format_file_list, format_users
from .sorting import sort_by_name, sort_by_size
from .storage import Storage
from .vault import VaultError, delete_file, download_file, remove_user, upload_file

_FLAG_HELP = (
    "Incorrect runtime flag.\n"
    "-d for debugging mode\n"
    "-p for production mode\n"
)


def _print_login_menu(console: Console) -> None:
    console.write(
        "\nUser menu\n"
        "1. Upload file\n"
        "2. Display file list\n"
        "3. Delete user\n"
        "4. Exit program\n"
        "Enter choice> "
    )


def _print_display_files_menu(console: Console) -> None:
    console.write(
        "\nDisplay files menu\n"
        "1. Display by last added\n"
        "2. Display by file size\n"
        "3. Display alphabetically\n"
        "4. Back\n"
        "Enter choice> "
    )


def _print_file_options(console: Console) -> None:
    console.write(
        "\nWhat would you like to do with the file?\n"
        "1. Delete file\n"
        "2. Download file\n"
        "3. Back\n"
        "Enter choice> "
    )


def _ask_yes_no(console: Console, prompt: str) -> bool:
    console.write(prompt)
    answer = console.read_char()
    while answer not in ("Y", "N"):
        console.write("Invalid choice.\n")
        console.write(prompt)
        answer = console.read_char()
    return answer == "Y"


def file_options(console: Console, storage: Storage, user: User, record: FileRecord | None) -> None:
    """Offer to delete or download ``record``."""
    if record is None:
        return
    file_name = record.display_name()
    console.write(f"\nFile chosen: {file_name}")
    _print_file_options(console)
    choice = console.read_char()
    while True:
        if choice == "1":
            console.write("\nWARNING: deleting file is irreversible\n")
            if _ask_yes_no(console, f"Do you wish to delete {file_name} (Y/N)> "):
                delete_file(storage, user, record)
                storage.save_user_files(user)
                return
        elif choice == "2":
            try:
                dest = download_file(storage, record, user.key)
            except (VaultError, CompressionError) as exc:
                console.write(f"Error: {exc}\n")
            else:
                console.write(f"\nDownload success. File available at {dest}\n")
            return
        elif choice == "3":
            return
        else:
            console.write("Invalid choice.\n")
        _print_file_options(console)
        choice = console.read_char()


def choose_file(console: Console, storage: Storage, user: User, files: list[FileRecord]) -> None:
    """List ``files``, let the user pick one by number and act on it; 0 goes back."""
    if not files:
        console.write("No files to display.\n")
        return
    console.write(format_file_list(files))
    console.write("Select file (Enter 0 to exit)> ")
    choice = console.read_int()
    while choice < 0 or choice > len(files):
        console.write("File not in list, try again> ")
        choice = console.read_int()
    if choice == 0:
        return
    try:
        record = find_file(user.files, files[choice - 1].name)
    except LookupError:
        console.write("Error: no name match\n")
        return
    file_options(console, storage, user, record)


def files_display_menu(console: Console, storage: Storage, user: User) -> None:
    """Show the user's files in a chosen order until the user goes back."""
    _print_display_files_menu(console)
    choice = console.read_int()
    while choice != 4:
        if choice == 1:
            console.write("\nDisplay by Last Added\n")
            choose_file(console, storage, user, user.files)
        elif choice == 2:
            console.write("\nDisplay by File Size (largest to smallest)\n")
            choose_file(console, storage, user, sort_by_size(user.files))
        elif choice == 3:
            console.write("\nDisplay by File Name (alphabetically)\n")
            choose_file(console, storage, user, sort_by_name(user.files))
        else:
            if choice != 0:
                console.clear_input()
            console.write("Invalid choice.\n")
        _print_display_files_menu(console)
        choice = console.read_int()


def _upload(console: Console, storage: Storage, user: User) -> None:
    console.write("\nEnsure that your file is in file_upload directory.\n")
    console.write(f"Enter name of your file (MAX NAME SIZE = {MAX_NAME_SIZE - 1})\n")
    console.write("Ensure your input is the form of <file_name>.<file_type>\n")
    console.write("File name> ")
    file_name = console.read_string(MAX_NAME_SIZE)
    try:
        upload_file(storage, user, file_name)
    except VaultError as exc:
        console.write(f"Error: {exc}\n")
        return
    source = storage.upload_path(file_name)
    console.write(f"File open success! File path: {source}\n")
    console.write(f"File successfully downloaded, free to delete file at {source}\n")


def _start_menu(console: Console, storage: Storage, users: list[User], debug: bool) -> User | None:
    while True:
        print_menu(console, debug)
        choice = console.read_char()
        if choice == "1":
            user = user_login(console, users)
            if user is not None:
                return user
        elif choice == "2":
            user_add(console, users)
            storage.save_users(users)
        elif choice == "3":
            print_about(console, debug)
        elif choice == "4":
            console.write("Exiting...\n")
            storage.save_users(users)
            return None
        elif debug and choice == "5":
            console.write("\nDisplaying users...\n")
            console.write(format_users(users))
        else:
            console.write("Invalid choice.\n")


def _user_menu(console: Console, storage: Storage, user: User, users: list[User]) -> None:
    while True:
        _print_login_menu(console)
        choice = console.read_char()
        if choice == "1":
            _upload(console, storage, user)
            storage.save_user_files(user)
        elif choice == "2":
            files_display_menu(console, storage, user)
        elif choice == "3":
            console.write("\nWARNING: deleting user removes all user data\n")
            console.write("This includes all stored files as well as deletion of account\n")
            if _ask_yes_no(console, "\nDo you still wish to proceed (Y/N)> "):
                console.write("Deleting all user data...\n")
                remove_user(storage, user, users)
                console.write("All user data deleted. Exiting program.\n")
                return
        elif choice == "4":
            console.write("Exiting...\n")
            return
        else:
            console.write("Invalid choice.\n")


def run(console: Console, storage: Storage, debug: bool = False) -> None:
    """Run the whole interactive session; ends quietly when input runs out."""
    if not storage.users_path.exists():
        console.write("No user data exists\n")
    users = storage.load_users()
    try:
        user = _start_menu(console, storage, users, debug)
        if user is None:
            return
        user.key = generate_key(user.username)
        if not storage.user_data_path(user).exists():
            console.write("User has no file data\n")
        storage.load_user_files(user)
        _user_menu(console, storage, user, users)
    except EOFError:
        return


def main(argv: list[str] | None = None) -> int:
    """Start the vault in the current directory with ``-d`` or ``-p``."""
    args = sys.argv[1:] if argv is None else list(argv)
    console = Console()
    if len(args) != 1 or args[0] not in ("-d", "-p"):
        console.write(_FLAG_HELP)
        return 0
    debug = args[0] == "-d"
    if debug:
        console.write("\nDebugging mode activated\n")
    else:
        console.write("\nYou are in production mode\n")
    run(console, Storage("."), debug)
    return 0


if __name__ == "__main__":
    sys.exit(main())