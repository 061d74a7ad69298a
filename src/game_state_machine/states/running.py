import logging
import time

from game_state_machine.states.state import State

logger = logging.getLogger(__name__)


class RunningState(State):
    def __init__(self, machine):
        super().__init__(machine)
        self.started_at = None

    def on_enter(self):
        super().on_enter()
        self.started_at = time.monotonic()

    def on_exit(self):
        super().on_exit()
        if self.started_at is not None:
            logger.debug(f"Game ran for {time.monotonic() - self.started_at:.1f}s")
        self.started_at = None
