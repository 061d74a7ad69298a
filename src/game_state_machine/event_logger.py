import logging
import sys

DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class EventLogger:
    """Writes one timestamped line per machine event.

    Lines look like ``[2024-01-31 13:05:09] Transition: IDLE -> RUNNING``.
    Each instance owns an unregistered logger, so two machines never share
    handlers.
    """

    def __init__(self, stream=None, name='game_state_machine.events'):
        formatter = logging.Formatter('[%(asctime)s] %(message)s', datefmt=DATE_FORMAT)
        self.logger = logging.Logger(name, logging.INFO)
        self.logger.propagate = False

        stream_handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
        stream_handler.setFormatter(formatter)
        self.logger.addHandler(stream_handler)

    def log(self, message: str):
        self.logger.info(message)
