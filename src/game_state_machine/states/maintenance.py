import logging

from game_state_machine.states.state import State

logger = logging.getLogger(__name__)


class MaintenanceState(State):
    def on_enter(self):
        super().on_enter()
        logger.debug("Door open, machine in maintenance.")

    def on_exit(self):
        super().on_exit()
        logger.debug("Leaving maintenance.")
