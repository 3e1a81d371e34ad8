from loguru import logger

from roster.application.commands.base import (
    BatchesCommand,
    RemindCommand,
    ShellCommand,
    ShowCommand,
    ToggleCommand,
)
from roster.application.commands.load import ensure_loaded
from roster.application.commands.remind import handle_remind
from roster.application.commands.show import handle_batches, handle_show
from roster.application.commands.toggle import handle_toggle


class CommandDispatcher:
    """Dispatches CLI commands to appropriate handlers"""

    def __init__(self, session, renderer) -> None:
        self.session = session
        self.renderer = renderer
        self._handlers = {
            "show": self._handle_show,
            "batches": self._handle_batches,
            "toggle": self._handle_toggle,
            "remind": self._handle_remind,
            "shell": self._handle_shell,
        }

    async def dispatch(self, argv: list[str]) -> int:
        """Parse and execute command

        Args:
            argv: Command line arguments (sys.argv)

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        if len(argv) < 2:
            self._print_usage()
            return 1

        method = argv[1]
        handler = self._handlers.get(method)

        if handler is None:
            logger.error(f"Unknown method: {method}")
            self._print_usage()
            return 1

        return await handler(argv)

    def _print_usage(self) -> None:
        """Print available commands"""
        logger.error(
            "No method specified. Available: show, batches, toggle, remind, shell"
        )

    async def _handle_show(self, argv: list[str]) -> int:
        """Handle show command"""
        batch = " ".join(argv[2:]) if len(argv) > 2 else None
        command = ShowCommand(name="show", batch=batch)
        return await handle_show(self.session, self.renderer, command)

    async def _handle_batches(self, argv: list[str]) -> int:
        """Handle batches command"""
        command = BatchesCommand(name="batches")
        return await handle_batches(self.session, self.renderer, command)

    async def _handle_toggle(self, argv: list[str]) -> int:
        """Handle toggle command"""
        if len(argv) < 4:
            logger.error("Usage: toggle <candidate_id> <field>")
            return 1
        command = ToggleCommand(
            name="toggle", candidate_id=argv[2], field=argv[3]
        )
        return await handle_toggle(self.session, self.renderer, command)

    async def _handle_remind(self, argv: list[str]) -> int:
        """Handle remind command"""
        if len(argv) < 4:
            logger.error("Usage: remind <days> <batch>")
            return 1
        try:
            days = int(argv[2])
        except ValueError:
            logger.error(f"Days must be an integer, got {argv[2]!r}")
            return 1
        command = RemindCommand(
            name="remind", days=days, batch=" ".join(argv[3:])
        )
        return await handle_remind(self.session, self.renderer, command)

    async def _handle_shell(self, argv: list[str]) -> int:
        """Handle shell command"""
        from roster.presentation.shell import InteractiveShell

        command = ShellCommand(name="shell")
        logger.info(f"Starting {command.name}")
        if not await ensure_loaded(self.session, self.renderer):
            return 1
        await InteractiveShell(self.session, self.renderer).run()
        return 0
