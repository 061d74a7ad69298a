import logging

logger = logging.getLogger(__name__)


class State:
    def __init__(self, machine):
        self.machine = machine

    def on_enter(self):
        logger.debug(f"Entering state: {self.__class__.__name__}")

    def on_exit(self):
        logger.debug(f"Exiting state: {self.__class__.__name__}")
