from game_state_machine.states.state import State
from game_state_machine.states.idle import IdleState
from game_state_machine.states.running import RunningState
from game_state_machine.states.maintenance import MaintenanceState
from game_state_machine.states.updating import UpdatingState
from game_state_machine.states.error import ErrorState

__all__ = [
    "State",
    "IdleState",
    "RunningState",
    "MaintenanceState",
    "UpdatingState",
    "ErrorState",
]
