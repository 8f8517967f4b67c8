"""
WLEDDimCurve
------------
Message module
for displaying the generated curve status.

This module builds a styled Rich console panel that tells the user which curve
was generated, what its endpoints are and whether the table passed validation.
Parameter adjustments made by the sanitizer are listed when verbose output is
requested, so a misconfigured preset is easy to spot.
"""

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

console = Console(stderr=True)


class Msg:
    @staticmethod
    def curve_summary(preset, result, valid, verbose=False):
        table = result.table

        message = Text()
        message.append("Preset: ", style="bold")
        message.append(f"{preset.name}\n", style="cyan")
        message.append("Curve: ", style="bold")
        message.append(f"{result.curve}\n", style="cyan")
        message.append("Endpoints: ", style="bold")
        message.append(f"{int(table[0])} → {int(table[-1])}\n")
        message.append("Midpoint: ", style="bold")
        message.append(f"{int(table[len(table) // 2])}\n\n")

        if result.fallback:
            message.append("⚠ Invalid parameters, linear fallback used\n", style="yellow")
        elif result.sanitized:
            message.append("⚠ Some parameters were replaced by defaults\n", style="yellow")

        if verbose:
            for note in result.notes:
                message.append(f"  • {note}\n", style="dim")

        if valid:
            message.append("✅ Table is valid", style="bold green")
        else:
            message.append("❌ Table failed validation", style="bold red")

        console.print(
            Panel(
                message,
                title="Dim Curve",
                border_style="green" if valid else "red",
                padding=(1, 2),
            )
        )

    @staticmethod
    def error(text):
        console.print(f"[bold red]❌ {text}[/bold red]")
