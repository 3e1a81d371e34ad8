"""
Interactive operator console for the candidate dashboard.
"""

import asyncio

from rich.markup import escape
from rich.panel import Panel

from roster.shared.constants import ALL_BATCHES
from roster.shared.exceptions import ReminderFailure, UpdateFailure


class InteractiveShell:
    """Interactive command loop over one loaded dashboard session."""

    def __init__(self, session, renderer):
        self.session = session
        self.renderer = renderer
        self.console = renderer.console

    def show_welcome(self):
        """Display welcome message."""
        welcome_text = """
        [bold cyan]Candidate Dashboard[/bold cyan]

        Commands:
        [yellow]batches[/yellow]              - List batches
        [yellow]select <batch|all>[/yellow]   - Filter by batch (e.g., 'select Batch March 2024')
        [yellow]stats[/yellow]                - Show statistics for the selection
        [yellow]list[/yellow]                 - Show candidates for the selection
        [yellow]toggle <id> <field>[/yellow]  - Flip whatsappMsg, phoneEnquiry, online or program
        [yellow]remind <days>[/yellow]        - Email the selected batch (e.g., 'remind 7')
        [yellow]help[/yellow]                 - Show this help
        [yellow]quit[/yellow]                 - Exit
        """
        self.console.print(
            Panel(welcome_text, title="[bold]Welcome[/bold]", border_style="cyan")
        )

    def select(self, argument: str) -> None:
        selection = ALL_BATCHES if argument.lower() in ("all", "") else argument
        try:
            self.session.select(selection)
        except ValueError as e:
            self.renderer.render_error(str(e))
            return
        self.console.print(f"[cyan]Selected: {escape(self.session.selection)}[/cyan]")

    async def toggle(self, raw_id: str, field: str) -> None:
        try:
            candidate_id = self.session.store.resolve_id(raw_id)
            result = await self.session.toggle(candidate_id, field)
        except (KeyError, ValueError) as e:
            self.renderer.render_error(str(e.args[0] if e.args else e))
            return
        except UpdateFailure:
            self.renderer.render_notices(self.session.drain_notices())
            return
        self.renderer.render_toggle(result)

    async def remind(self, raw_days: str) -> None:
        try:
            days = int(raw_days)
            await self.session.send_reminders(days)
        except ValueError as e:
            self.renderer.render_error(str(e))
            return
        except ReminderFailure:
            self.renderer.render_notices(self.session.drain_notices())
            return
        self.renderer.render_notices(self.session.drain_notices())

    async def handle(self, command: str) -> bool:
        """Execute one command line.

        Returns:
            False when the operator asked to quit
        """
        parts = command.split()
        cmd = parts[0].lower()
        # Batch labels may contain repeated spaces; keep the remainder as typed
        rest = command.split(maxsplit=1)[1] if len(parts) > 1 else ""

        if cmd in ("quit", "exit", "q"):
            self.console.print("[yellow]Goodbye![/yellow]")
            return False

        elif cmd == "help":
            self.show_welcome()

        elif cmd == "batches":
            self.renderer.render_batches(self.session)

        elif cmd == "select":
            self.select(rest.strip())

        elif cmd == "stats":
            self.renderer.render_statistics(self.session)

        elif cmd == "list":
            self.renderer.render_candidates(self.session)

        elif cmd == "toggle":
            if len(parts) < 3:
                self.console.print("[red]Usage: toggle <id> <field>[/red]")
            else:
                await self.toggle(parts[1], parts[2])

        elif cmd == "remind":
            if len(parts) < 2:
                self.console.print("[red]Usage: remind <days>[/red]")
            else:
                await self.remind(parts[1])

        else:
            self.console.print(f"[red]Unknown command: {escape(cmd)}[/red]")

        return True

    async def run(self):
        """Run interactive console."""
        self.show_welcome()
        self.renderer.render_dashboard(self.session)

        while True:
            try:
                command = (await asyncio.to_thread(input, "> ")).strip()
            except (EOFError, KeyboardInterrupt):
                self.console.print("\n[yellow]Goodbye![/yellow]")
                break

            if not command:
                continue

            if not await self.handle(command):
                break
