import logging

from game_state_machine.states.state import State

logger = logging.getLogger(__name__)


class UpdatingState(State):
    def __init__(self, machine):
        super().__init__(machine)
        self.package = None

    def run(self, package_name, duration):
        """Simulated install: blocks the caller for ``duration`` seconds."""
        self.package = package_name
        logger.debug(f"Installing package {package_name} ({duration}s)")
        self.machine.sleep(duration)

    def on_exit(self):
        super().on_exit()
        self.package = None
