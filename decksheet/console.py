"""Interactive console helpers: prompts and error display."""

import os
from pathlib import Path
from typing import Optional

import click


def show_exception(exc: BaseException) -> None:
    """Print an exception followed by each exception that caused it."""
    click.echo(err=True)
    click.echo(f"Error: {exc}", err=True)

    seen = {id(exc)}
    cause = exc.__cause__ or exc.__context__
    while cause is not None and id(cause) not in seen:
        seen.add(id(cause))
        click.echo(f"--> {cause}", err=True)
        cause = cause.__cause__ or cause.__context__


def prompt(message: str) -> str:
    """Read one line of input after ``<message>: ``."""
    return click.prompt(message, default="", show_default=False, prompt_suffix=": ")


def prompt_yes_no(message: str, default: bool) -> bool:
    """Ask a yes/no question.

    Empty input returns ``default``. Any prefix of the other answer
    (case-insensitive) flips it; anything else also returns ``default``.
    """
    if default:
        suffix, other = " (Y/n)? ", "no"
    else:
        suffix, other = " (y/N)? ", "yes"

    answer = click.prompt(message, default="", show_default=False, prompt_suffix=suffix)
    if not answer:
        return default

    answer = answer.lower()
    if answer == other[:len(answer)]:
        return not default
    return default


def is_valid_file_path(path: str) -> bool:
    """Check whether a new file can be created at ``path``."""
    try:
        with open(path, "xb"):
            pass
    except OSError:
        return False
    os.remove(path)
    return True


def prompt_file(message: str) -> Optional[str]:
    """Ask for an output file path until a usable one is given.

    Returns None if the answer is blank. Existing files are only
    accepted after confirming the overwrite.
    """
    while True:
        path = prompt(message).strip()
        if not path:
            return None

        if Path(path).is_file():
            if prompt_yes_no("Overwrite this file", False):
                return path
        elif is_valid_file_path(path):
            return path
        else:
            click.echo("Invalid file path")
