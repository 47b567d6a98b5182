"""Prompt and output helpers for the terminal.

Every function works on one module-level `rich.console.Console`. Text passed
to the `write*` functions is Rich markup; escape dynamic content with
`rich.markup.escape` before handing it over.
"""

from __future__ import annotations

import json
from typing import Any

from rich import box
from rich.console import Console
from rich.json import JSON
from rich.panel import Panel
from rich.prompt import InvalidResponse, Prompt

from cli.ui_components import build_header
from core.domain.validation import Validator, validate_http_url, validate_not_empty

_console = Console()


class ValidatedPrompt(Prompt):
    """A string prompt that re-asks until `validator` accepts the answer."""

    prompt_suffix = " "
    validate_error_message = "[red]Invalid input[/]"

    def __init__(self, prompt: str = "", *, validator: Validator | None = None, **kwargs: Any) -> None:
        super().__init__(prompt, **kwargs)
        self.validator = validator

    @classmethod
    def get_input(cls, console: Console, prompt: Any, password: bool, stream: Any = None) -> str:
        # Blank answers count as empty, so they select the default.
        return super().get_input(console, prompt, password, stream=stream).strip()

    def process_response(self, value: str) -> str:
        value = super().process_response(value)
        if self.validator is not None:
            result = self.validator(value)
            if not result.successful:
                raise InvalidResponse(result.message or self.validate_error_message)
        return value


def show_header() -> None:
    """Clear the terminal and draw the application header."""

    _console.clear()
    _console.print(build_header())
    _console.line()


def prompt_string(
    message: str,
    default: str | None = None,
    validator: Validator | None = None,
    show_header_first: bool = False,
) -> str:
    """Ask for a line of text.

    An empty answer returns `default` when one is given (non-empty); otherwise
    the answer goes through `validator` and the question is repeated until it
    is accepted.
    """

    if show_header_first:
        show_header()

    prompt = ValidatedPrompt(f"[white]{message}[/]", console=_console, validator=validator)
    if default:
        return prompt(default=default)
    return prompt()


def get_string(message: str, default: str | None = None, show_header_first: bool = False) -> str:
    return prompt_string(message, default, validate_not_empty, show_header_first)


def get_url(message: str, show_header_first: bool = False) -> str:
    """Ask for an absolute http/https URL."""

    return prompt_string(message, None, validate_http_url, show_header_first)


def write_json(value: Any, header: str) -> None:
    """Render `value` as indented JSON inside a titled panel."""

    text = json.dumps(value, indent=2, ensure_ascii=False)
    _console.print(
        Panel(
            JSON(text, indent=2),
            title=header,
            box=box.ROUNDED,
            border_style="yellow",
            expand=False,
        )
    )


def write_line(text: str) -> None:
    _console.print(f"[white]{text}[/]")


def write_error_line(text: str) -> None:
    _console.print(f"[red]{text}[/]")


def write(text: str) -> None:
    _console.print(f"[white]{text}[/]", end="")


def write_error(text: str) -> None:
    _console.print(f"[red]{text}[/]", end="")


def wait_for_exit(message: str) -> None:
    """Show `message` and block until Enter is pressed."""

    write_line(message)
    _console.input()
