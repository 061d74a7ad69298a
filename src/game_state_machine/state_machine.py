import logging
import time
from enum import Enum

from game_state_machine.states import (
    ErrorState,
    IdleState,
    MaintenanceState,
    RunningState,
    UpdatingState,
)

DEFAULT_UPDATE_DURATION = 1.0

logger = logging.getLogger(__name__)


class MachineState(Enum):
    IDLE = "IDLE"
    RUNNING = "RUNNING"
    MAINTENANCE = "MAINTENANCE"
    UPDATING = "UPDATING"
    ERROR = "ERROR"

    def __str__(self):
        return self.name


class StateMachine:
    def __init__(self, event_logger, update_duration=DEFAULT_UPDATE_DURATION, sleep=time.sleep):
        self.event_logger = event_logger
        self.update_duration = update_duration
        self.sleep = sleep

        self.states = {
            MachineState.IDLE: IdleState(self),
            MachineState.RUNNING: RunningState(self),
            MachineState.MAINTENANCE: MaintenanceState(self),
            MachineState.UPDATING: UpdatingState(self),
            MachineState.ERROR: ErrorState(self),
        }
        self._state = MachineState.IDLE
        self.current_state = self.states[self._state]
        self.current_state.on_enter()

        self.log(f"System initialized. Current state: {self._state}")

    @property
    def state(self) -> MachineState:
        return self._state

    def log(self, message):
        self.event_logger.log(message)

    def _transition(self, target: MachineState):
        logger.debug(f"{self._state} -> {target}")
        self.current_state.on_exit()
        self._state = target
        self.current_state = self.states[target]
        self.current_state.on_enter()

    def start_game(self):
        self.log("Command received: start_game")

        if self._state is MachineState.IDLE:
            self._transition(MachineState.RUNNING)
            self.log("Transition: IDLE -> RUNNING")
        else:
            self.log(f"Invalid transition: Cannot start game from {self._state}")

    def stop_game(self):
        self.log("Command received: stop_game")

        if self._state is MachineState.RUNNING:
            self._transition(MachineState.IDLE)
            self.log("Transition: RUNNING -> IDLE")
        else:
            self.log(f"Invalid transition: Cannot stop game from {self._state}")

    def signal(self, signal: str):
        self.log(f"Signal received: {signal}")

        if signal == "door_open":
            self._transition(MachineState.MAINTENANCE)
            self.log("Transition: -> MAINTENANCE (door opened)")
        elif signal == "door_close":
            self._transition(MachineState.IDLE)
            self.log("Transition: -> IDLE (door closed)")
        else:
            self.log("Unknown signal.")

    def update_package(self, package_name: str):
        self.log(f"Update command received. Package: {package_name}")

        if self._state is MachineState.RUNNING:
            self.log("Stopping game before update.")
            self._transition(MachineState.IDLE)

        self._transition(MachineState.UPDATING)
        self.log("Transition: -> UPDATING")

        try:
            self.current_state.run(package_name, self.update_duration)
        finally:
            self._transition(MachineState.IDLE)
        self.log("Update completed. Transition: UPDATING -> IDLE")

    def device_command(self, device: str, action: str, value: str):
        self.log(f"Device command received: {device} {action} {value}")

        if device == "bill_validator" and action == "ack":
            self.log(f"Bill validator ACK turned {value}")
        else:
            self.log("Unknown device command.")

    def os_command(self, command: str, value: str):
        self.log(f"OS command received: {command} {value}")

        if command == "set-timezone":
            self.log(f"Timezone set to {value}")
        else:
            self.log("Unknown OS command.")

    def print_status(self):
        self.log(f"Current state: {self._state}")
