"""Account creation, credential checks and the start-up menu texts."""

from __future__ import annotations

import sys

from .console import Console
from .models import MAX_NAME_SIZE, User, username_exists

_MIN_LENGTH = 5
_WHITESPACE = (" ", "\t", "\n")


class ValidationError(ValueError):
    """Raised when a proposed username or password breaks the rules."""


def validate_username(username: str, users: list[User], max_size: int = MAX_NAME_SIZE) -> str:
    """Return ``username`` if it may be used for a new account.

    Raises ValidationError when it is too long, shorter than 5 characters,
    already taken, or contains blanks.
    """
    if len(username) > max_size - 1:
        raise ValidationError(f"username exceeds max character limit ({max_size}).")
    if len(username) < _MIN_LENGTH:
        raise ValidationError("username is shorter than 5 characters")
    if username_exists(users, username):
        raise ValidationError("username already exists")
    if any(ch in _WHITESPACE for ch in username):
        raise ValidationError("username contains white space input")
    return username


def validate_password(password: str, max_size: int = MAX_NAME_SIZE) -> str:
    """Return ``password`` if it is acceptable.

    It must fit in ``max_size - 1`` characters, have at least 5, and hold an
    upper-case letter, a lower-case letter and a digit.
    """
    if len(password) > max_size - 1:
        raise ValidationError(f"password exceeds max character limit ({max_size}).")
    if len(password) < _MIN_LENGTH:
        raise ValidationError("password is shorter than 5 characters")
    has_upper = any("A" <= ch <= "Z" for ch in password)
    has_lower = any("a" <= ch <= "z" for ch in password)
    has_digit = any("0" <= ch <= "9" for ch in password)
    if not (has_upper and has_lower and has_digit):
        raise ValidationError(
            "Include at least 1 of each: capital letter, lowercase letter, number"
        )
    return password


def authenticate(users: list[User], username: str, password: str) -> User | None:
    """Return the first user whose username and password both match, else None."""
    for user in users:
        if user.username == username and user.password == password:
            return user
    return None


def user_login(console: Console, users: list[User]) -> User | None:
    """Ask for credentials and return a fresh record of the matching user, or None."""
    console.write("Enter Username> ")
    username = console.read_line(MAX_NAME_SIZE)
    console.write("Enter Password> ")
    secret = console.read_line(MAX_NAME_SIZE)

    if not users:
        console.write("Error: no users exist. Create user and try again.\n")
        return None

    match = authenticate(users, username, secret)
    if match is None:
        console.write("User login unsuccessful.\n")
        return None
    console.write("User login successful\n")
    return User(match.username, match.password)


def user_add(console: Console, users: list[User]) -> User:
    """Prompt until a valid username and password are given; add the user at the front."""
    limit = MAX_NAME_SIZE - 1
    console.write("\nREQUIREMENTS:\n")
    console.write(
        "Username must:\n"
        "- contain no white space characters\n"
        "- be longer than 5 characters\n"
        f"- must be smaller than {limit}\n"
    )
    console.write(
        "Password must:\n"
        "- contain at least 1 lower case letter\n"
        "- contain at least 1 upper case letter\n"
        "- contain at least 1 number\n"
        "- be longer than 5 characters\n"
        f"- must be smaller than {limit}\n"
    )

    console.write("\nEnter Username> ")
    while True:
        username = console.read_line(MAX_NAME_SIZE + 1)
        try:
            validate_username(username, users)
            break
        except ValidationError as exc:
            console.write(f"Error: {exc}\n")
            console.write("Invalid username. Username> ")

    console.write("Enter Password> ")
    while True:
        secret = console.read_line(MAX_NAME_SIZE + 1)
        try:
            validate_password(secret)
            break
        except ValidationError as exc:
            console.write(f"Error: {exc}\n")
            console.write("Invalid password. Password> ")

    new_user = User(username, secret)
    users.insert(0, new_user)
    console.write("User added successfully.\n")
    return new_user


def print_menu(console: Console, debug: bool = False) -> None:
    """Show the start-up menu; debug mode adds the user listing option."""
    extra = "5. Display Users\n" if debug else ""
    console.write(
        "\nWeclome to file storage program, what would you like to do?\n"
        "1. Log-in\n"
        "2. Create New User\n"
        "3. About\n"
        "4. Exit\n"
        f"{extra}"
        "Enter your choice> "
    )


def print_about(console: Console, debug: bool = False) -> None:
    """Show what the program does; in debug mode also exercise debug output."""
    console.write(
        "\nThis program is a simple user management system with image compression.\n"
        "It allows users to create an account, log in, and compress an image.\n"
        "These files are also automatically encrypted to provide security from digital attacks.\n"
    )
    if debug:
        sys.stderr.write("\nThis is a debug message test \n")
        sys.stderr.write(f"integer debug mode test {3}\n")
        sys.stderr.write(f"string debug: {'test'}\n")