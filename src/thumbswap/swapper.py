"""Pane swap orchestration."""
import logging
from pathlib import Path
from typing import Optional

from . import coordinator, dispatch, launcher, probe, result
from .config import Config
from .errors import InvalidLaunch
from .models.session import SessionContext
from .proc import Executor, ShellExecutor

logger = logging.getLogger(__name__)


class Swapper:
    """Runs one jump-to-text round trip against the active tmux pane.

    Each step fills in part of ``self.context``; ``run()`` calls them in
    order: find the active pane, start the picker in a hidden window, swap
    it in, wait for it to finish, read its selection and act on it.
    """

    def __init__(
        self,
        dir: str,
        command: str,
        upcase_command: str,
        osc52: bool = False,
        executor: Optional[Executor] = None,
        config: Optional[Config] = None,
        context: Optional[SessionContext] = None,
        wait_timeout: Optional[float] = None,
    ):
        """Initialize swapper.

        Args:
            dir: thumbs installation directory, set by the tmux plugin wrapper
            command: Command template for a normal selection
            upcase_command: Command template for an upcase selection
            osc52: Also copy the selection through an OSC 52 sequence
            executor: Runs external commands (a ShellExecutor by default)
            config: Runtime settings, defaults when omitted
            context: Pre-built session context (a fresh one by default)
            wait_timeout: Seconds to wait for the picker, None blocks forever
        """
        if not dir:
            raise InvalidLaunch("Invalid thumbswap execution. Are you trying to execute thumbswap directly?")

        self.dir = dir
        self.command = command
        self.upcase_command = upcase_command
        self.osc52 = osc52
        self.executor = executor or ShellExecutor()
        self.config = config or Config()
        self.context = context or SessionContext.create(self.config.runtime.result_file)
        self.wait_timeout = wait_timeout if wait_timeout is not None else self.config.runtime.wait_timeout

    def capture_active_pane(self):
        self.context.active_pane = probe.capture_active_pane(self.executor)

    def execute_picker(self):
        self.context.picker_pane_id = launcher.launch_picker(
            self.executor,
            self.context.active_pane,
            self.dir,
            self.config.picker.binary,
            self.context.result_file,
            self.context.signal,
            window_name=self.config.runtime.window_name,
        )

    def swap_panes(self):
        coordinator.swap_panes(self.executor, self.context.active_pane.id, self.context.picker_pane_id)

    def wait_picker(self):
        coordinator.wait_for_completion(self.executor, self.context.signal, timeout=self.wait_timeout)

    def retrieve_content(self):
        self.context.selection = result.retrieve_and_clear(Path(self.context.result_file))

    def execute_command(self) -> Optional[str]:
        return dispatch.dispatch(
            self.executor,
            self.context.selection,
            self.command,
            self.upcase_command,
            osc52=self.osc52,
            shell=self.config.runtime.shell,
            osc52_delay=self.config.runtime.osc52_delay,
        )

    def run(self) -> Optional[str]:
        """Run every step, returning the executed command if any."""
        logger.info(f"Starting thumbswap round trip ({self.context.signal})")
        self.capture_active_pane()
        self.execute_picker()
        self.swap_panes()
        self.wait_picker()
        self.retrieve_content()
        return self.execute_command()
