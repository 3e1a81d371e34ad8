"""
Rich rendering of the candidate dashboard.

Pure view: everything shown here is derived by the session.
"""

from datetime import date

from rich.columns import Columns
from rich.console import Console, Group
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from roster.domain.models import Candidate, Statistics, StatusField
from roster.shared.constants import ALL_BATCHES, REMINDER_DAY_PRESETS

# (label shown for the positive value, label for anything else, colour when not positive)
_BADGES = {
    StatusField.WHATSAPP_MSG: ("Sent", "Pending", "yellow"),
    StatusField.PHONE_ENQUIRY: ("Done", "Not Done", "yellow"),
    StatusField.ONLINE: ("Attended", "Absent", "red"),
    StatusField.PROGRAM: ("Attended", "Ghosted", "red"),
}


def short_batch_label(batch: str) -> str:
    """First two words of a batch label, as shown in the sidebar"""
    return " ".join(batch.split(" ")[:2])


def format_application_date(value: date | str | None) -> str:
    """Format as e.g. '05 Mar 2024'; unparsed values are shown as received"""
    if isinstance(value, date):
        return value.strftime("%d %b %Y")
    return value or "N/A"


def status_badge(candidate: Candidate, status_field: StatusField) -> Text:
    positive_label, other_label, other_style = _BADGES[status_field]
    if candidate.status(status_field) == status_field.positive:
        return Text(f"✓ {positive_label}", style="green")
    return Text(f"✗ {other_label}", style=other_style)


class DashboardRenderer:
    """Renders session state to a rich Console."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def render_load_error(self, message: str) -> None:
        self.console.print(
            Panel(
                f"[red]Error: {escape(message)}[/red]",
                title="[bold]Candidate Dashboard[/bold]",
                border_style="red",
            )
        )

    def render_error(self, message: str) -> None:
        self.console.print(f"[red]✗ {escape(message)}[/red]")

    def render_notices(self, notices) -> None:
        for notice in notices:
            if notice.level == "error":
                self.console.print(f"[red]✗ {escape(notice.message)}[/red]")
            else:
                self.console.print(f"[green]✓ {escape(notice.message)}[/green]")

    def render_toggle(self, result) -> None:
        self.console.print(
            f"[green]✓ {result.field} for {escape(str(result.candidate_id))}: "
            f"{escape(result.previous_value or 'unset')} → {result.value}[/green]"
        )

    def render_batches(self, session) -> None:
        """Batch sidebar with reminder presets for the selected batch."""
        lines = []
        for batch in [ALL_BATCHES, *session.batches]:
            label = escape(batch if batch == ALL_BATCHES else short_batch_label(batch))
            if batch == session.selection:
                lines.append(f"[bold blue]▸ {label}[/bold blue]")
            else:
                lines.append(f"  {label}")

        if session.can_send_reminders:
            presets = ", ".join(str(days) for days in REMINDER_DAY_PRESETS)
            lines.append("")
            lines.append(f"[cyan]Send reminders:[/cyan] {presets} days before")
        else:
            lines.append("")
            lines.append("[dim]Select a specific batch to send reminders[/dim]")

        self.console.print(
            Panel("\n".join(lines), title="[bold]Batches[/bold]", border_style="cyan")
        )

    def build_statistics_cards(self, stats: Statistics) -> Columns:
        counts = Table.grid(padding=(0, 2))
        counts.add_column(style="dim")
        counts.add_column(justify="right", style="bold")
        counts.add_row("Total Candidates:", str(stats.candidate_count))
        counts.add_row("WhatsApp Sent:", str(stats.whatsapp_sent))
        counts.add_row("Phone Enquiry Done:", str(stats.phone_enquiry_done))
        counts.add_row("Online Session Attended:", str(stats.online_attended))

        if stats.top_years:
            years = Table.grid(padding=(0, 2))
            years.add_column(style="dim")
            years.add_column(justify="right", style="bold")
            for entry in stats.top_years:
                years.add_row(Text(f"Year {entry.year}:"), f"{entry.count} candidates")
            years_body = years
        else:
            years_body = Text("No data available", style="dim")

        rate = Group(
            Text(stats.attendance_rate_display, style="bold blue", justify="center"),
            Text("Program Attendance", style="dim", justify="center"),
        )

        return Columns(
            [
                Panel(counts, title="Candidate Stats", border_style="blue"),
                Panel(years_body, title="Top Graduation Years", border_style="blue"),
                Panel(rate, title="Attendance Rate", border_style="blue"),
            ],
            equal=True,
            expand=True,
        )

    def build_candidate_table(self, title: str, candidates: list[Candidate]) -> Table:
        table = Table(title=escape(f"{title} ({len(candidates)})"))
        table.add_column("ID", style="dim")
        table.add_column("Date")
        table.add_column("Name", style="bold")
        table.add_column("Contact")
        table.add_column("College")
        table.add_column("Batch")
        table.add_column("WhatsApp")
        table.add_column("Phone")
        table.add_column("Online")
        table.add_column("Program")

        for c in candidates:
            table.add_row(
                Text(str(c.id)),
                Text(format_application_date(c.date_of_application)),
                Text(c.full_name),
                Text.assemble(c.contact_number, "\n", (c.email_id, "dim")),
                Text.assemble(
                    c.name_of_college,
                    "\n",
                    (f"{c.stream}, {c.year_of_completion or ''}", "dim"),
                ),
                Text(c.batch or ""),
                status_badge(c, StatusField.WHATSAPP_MSG),
                status_badge(c, StatusField.PHONE_ENQUIRY),
                status_badge(c, StatusField.ONLINE),
                status_badge(c, StatusField.PROGRAM),
            )
        return table

    def render_statistics(self, session) -> None:
        self.console.print(self.build_statistics_cards(session.statistics()))

    def render_candidates(self, session) -> None:
        self.console.print(self.build_candidate_table(session.title, session.filtered()))

    def render_dashboard(self, session) -> None:
        """Sidebar, stat cards, candidate table, then pending notices."""
        self.console.print("[bold]Candidate Dashboard[/bold]")
        self.render_batches(session)
        self.render_statistics(session)
        self.render_candidates(session)
        self.render_notices(session.drain_notices())
