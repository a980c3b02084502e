"""
Interactive Shell Mode.

Blocking, single-threaded read-eval-print loop. Uses Rich for output
formatting and basic input handling.

Each iteration prints the prompt, reads one line, skips it when empty,
tokenizes, dispatches and renders the outcome. Any error raised for a
single line is reported and the loop goes on. Only the exit command, end
of input or an interrupt (Ctrl-C arrives as KeyboardInterrupt) end it,
and all three release the open store first.
"""

from rich.console import Console, RenderableType
from rich.panel import Panel
from rich.text import Text

from kvrepl.core.config import get_app_config
from kvrepl.core.exceptions import ApplicationError, UnterminatedQuoteError
from kvrepl.core.logging import get_logger, log_with_source
from kvrepl.shell.dispatcher import dispatch
from kvrepl.shell.session import Session
from kvrepl.shell.tokenizer import tokenize

logger = get_logger(__name__)


class InteractiveShell:
    """
    Interactive shell over one Session.

    Usage:
        shell = InteractiveShell()
        exit_code = shell.run()
    """

    def __init__(self, session: Session | None = None, console: Console | None = None) -> None:
        self.session = session or Session()
        self.console = console or Console(highlight=False)
        self.settings = get_app_config().shell
        self.running = False

    def run(self) -> int:
        """Run the shell until exit, end of input or interrupt. Returns the exit status."""
        self.running = True

        self.console.print(Panel(
            Text(f"{self.settings.banner}\n{self.settings.hint}"),
            expand=False,
        ))

        try:
            while self.running:
                try:
                    line = self.console.input(Text(self.settings.prompt))
                except EOFError:
                    self.console.print()
                    log_with_source(logger, "shell", "info", "End of input")
                    break
                self.execute(line)
        except KeyboardInterrupt:
            self.console.print()
            self._emit("User Interrupt")
            log_with_source(logger, "shell", "info", "User interrupt", store_open=self.session.is_open)
        finally:
            self.session.release()

        return 0

    def execute(self, line: str) -> None:
        """Tokenize, dispatch and render a single input line."""
        if not line:
            return

        try:
            outcome = dispatch(tokenize(line), self.session)
            for renderable in outcome.lines:
                self._emit(renderable)
            if outcome.terminate:
                self.running = False
        except UnterminatedQuoteError as e:
            for text in e.diagnostic():
                self._emit(text)
        except ApplicationError as e:
            logger.debug("Command rejected", extra={"code": e.code})
            self._emit(e.message)
        except Exception as e:
            logger.exception("Command failed", extra={"line": line})
            self._emit(f"Error: {e}")

    def _emit(self, renderable: RenderableType) -> None:
        if isinstance(renderable, str):
            renderable = Text(renderable)
        self.console.print(renderable, soft_wrap=True)


def run_shell() -> int:
    """Run the interactive shell."""
    shell = InteractiveShell()
    return shell.run()
