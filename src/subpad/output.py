"""Tagged, color-coded output lines.

All user-facing text goes to standard output through one console. Color
is applied only when stdout is a terminal unless forced by ``configure``.
"""

from rich.console import Console
from rich.text import Text

COLOR_MODES = ("auto", "always", "never")


def _make_console(color: str = "auto") -> Console:
    kwargs = {}
    if color == "always":
        kwargs["force_terminal"] = True
    elif color == "never":
        kwargs["no_color"] = True
    return Console(
        highlight=False,
        markup=False,
        emoji=False,
        soft_wrap=True,
        **kwargs,
    )


console = _make_console()


def configure(color: str = "auto") -> None:
    """Rebuild the console for a color mode (auto, always, never)."""
    global console
    if color not in COLOR_MODES:
        raise ValueError(f"Unknown color mode: {color}. Valid: {', '.join(COLOR_MODES)}")
    console = _make_console(color)


def _tagged(tag: str, style: str, message: str) -> None:
    console.print(Text.assemble((tag, style), " ", message))


def print_status(message: str) -> None:
    _tagged("[INFO]", "green", message)


def print_warning(message: str) -> None:
    _tagged("[WARNING]", "bold yellow", message)


def print_error(message: str) -> None:
    _tagged("[ERROR]", "red", message)


def print_header(title: str) -> None:
    console.print(Text(f"=== {title} ===", style="blue"))


def print_raw(text: str = "") -> None:
    """Print text verbatim (git output, help text, blank lines)."""
    console.print(Text(text))


def ask(prompt: str) -> str:
    """Read one line of input after printing ``prompt``.

    End of input counts as an empty answer.
    """
    try:
        return console.input(prompt)
    except EOFError:
        console.print()
        return ""
