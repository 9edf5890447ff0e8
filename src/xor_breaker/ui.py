from typing import Optional, Sequence

from rich.console import Console, Group
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from xor_breaker.keysize import KeySizeCandidate
from xor_breaker.solver import BreakResult


COLORS = {
    "key": "bold yellow",
    "reliable": "spring_green2",
    "unreliable": "bold red",
    "chosen": "bold cyan",
}


def printable_key(key: bytes) -> str:
    """Show printable ASCII as-is and everything else as \\xNN escapes."""
    return "".join(
        chr(b) if 0x20 <= b < 0x7F else f"\\x{b:02x}"
        for b in key
    )


def format_score(score: float) -> str:
    return "∞" if score == float("inf") else f"{score:.4f}"


def render_summary(result: BreakResult) -> Table:
    table = Table(show_header=False, title="Repeating-key XOR", title_justify="left")
    table.add_column("Field", style="dim", no_wrap=True)
    table.add_column("Value")

    reliability = "reliable" if result.reliable else "unreliable"
    table.add_row("Estimated key size", str(result.estimated_key_size))
    table.add_row("Key size", str(result.key_size))
    table.add_row("Key", f"[{COLORS['key']}]{escape(printable_key(result.key))}[/{COLORS['key']}]")
    table.add_row("Key (hex)", result.key.hex(" ") or "-")
    table.add_row("Result", f"[{COLORS[reliability]}]{reliability}[/{COLORS[reliability]}]")
    return table


def render_candidates(candidates: Sequence[KeySizeCandidate], chosen: int) -> Table:
    table = Table(title="Key size candidates", title_justify="left")
    table.add_column("Rank", justify="right", style="dim")
    table.add_column("Key size", justify="right")
    table.add_column("Normalized distance", justify="right")

    for rank, candidate in enumerate(candidates, start=1):
        style = COLORS["chosen"] if candidate.size == chosen else None
        table.add_row(str(rank), str(candidate.size), format_score(candidate.score), style=style)
    return table


def render_plaintext(plaintext: bytes) -> Panel:
    text = Text(plaintext.decode("utf-8", errors="replace"))
    return Panel(text, title="Plaintext", padding=(0, 1))


def render(result: BreakResult, *, show_plaintext: bool = True) -> Group:
    """Render the break result."""
    parts = [render_summary(result)]
    if result.candidates:
        parts.append(render_candidates(result.candidates, result.estimated_key_size))
    if show_plaintext:
        parts.append(render_plaintext(result.plaintext))
    return Group(*parts)


def emit(result: BreakResult, console: Optional[Console] = None, *, show_plaintext: bool = True) -> None:
    console = console or Console()
    console.print(render(result, show_plaintext=show_plaintext))
