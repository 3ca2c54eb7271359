"""
Terminal output for the plugin installer.

One shared Rich Console with a small theme. Rich drops the colour codes
on its own when stdout is not a TTY (pipes, pytest capture), so callers
never have to check.
"""
from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

INSTALLER_THEME = Theme(
    {
        "ok": "green",
        "error": "red",
        "warning": "bold yellow",
    }
)

# file=None makes Rich look up sys.stdout on every write, which keeps
# capsys/redirect_stdout working.
# emoji=False keeps ':name:' in plugin names literal.
console = Console(theme=INSTALLER_THEME, highlight=False, soft_wrap=True, emoji=False)


def say(message: str = "", style: str | None = None) -> None:
    """Print a plain line. `message` is treated as literal text, not markup."""
    console.print(escape(message), style=style)


def ok(message: str) -> None:
    say(message, style="ok")


def warn(message: str) -> None:
    say(message, style="warning")


def error(message: str) -> None:
    say(message, style="error")
