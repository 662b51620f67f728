# ------------------------------------------------------------------------ #
#      o-o      o                o                                         #
#     /         |                |                                         #
#    O     o  o O-o  o-o o-o     |  oo o--o o-o o-o                        #
#     \    |  | |  | |-' |   \   o | | |  |  /   /                         #
#      o-o o--O o-o  o-o o    o-o  o-o-o--O o-o o-o                        #
#             |                           |                                #
#          o--o                        o--o                                #
#                        o--o      o         o                             #
#                        |   |     |         |  o                          #
#                        O-Oo  o-o O-o  o-o -o-    o-o o-o                 #
#                        |  \  | | |  | | |  |  | |     \                  #
#                        o   o o-o o-o  o-o  o  |  o-o o-o                 #
#                                                                          #
#    Jemison High School - Huntsville Alabama                              #
# ------------------------------------------------------------------------ #

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Mapping, Optional

from wpilib import Timer
from wpimath.units import seconds

from lib_5973.teleop.interfaces import TeleopDrive, VisionTarget
from lib_5973.teleop.modes import DriveIntents, GestureInput, OrientationMode, TeleopConfig
from lib_5973.util.combo_timer import ComboTimer

logger = logging.getLogger(__name__)


@dataclass
class ArbiterState:
    """
    Everything about how the driver wants to drive that lives from one cycle to
    the next. Only the ModeArbiter writes to this.

    field_oriented and goal_oriented are the toggle flags. Each one is only flipped
    by its own button, so they can disagree with 'mode'. The first field toggle
    after startup leaves us in Field Oriented.
    """
    mode: OrientationMode = OrientationMode.FIELD
    safe_mode: bool = False
    field_oriented: bool = False
    goal_oriented: bool = False
    heading_correction: float = 0.0


class ModeArbiter:
    """
    Decides which orientation mode we drive in and whether safe mode (reduced speed)
    is active. The driver changes these by holding buttons:

        TOGGLE_SAFE     Held for 'safe_hold_time' toggles safe mode
        TOGGLE_FIELD    Held for 'button_delay' toggles between Field Oriented and Robot POV
        TOGGLE_GOAL     Held for 'button_delay' toggles between Goal Oriented and Field Oriented.
                        If the camera has no target, we drop right back to Field Oriented.
        RESET_HEADING   Zeros the gyro every cycle it is held

    Holding both the field and goal buttons together does nothing.
    """
    def __init__(self, buttons: Mapping[GestureInput, Callable[[], bool]],
                 drive: TeleopDrive,
                 vision: VisionTarget,
                 config: Optional[TeleopConfig] = None,
                 clock: Callable[[], seconds] = Timer.getFPGATimestamp,
                 notify: Optional[Callable[[str], None]] = None):

        missing = [gesture.name for gesture in GestureInput if gesture not in buttons]
        if missing:
            raise ValueError(f"No button supplied for: {', '.join(missing)}")

        self._buttons = buttons
        self._drive = drive
        self._vision = vision
        self._config = config or TeleopConfig()
        self._notify = notify or logger.warning

        self._state = ArbiterState()
        self._held: Dict[GestureInput, bool] = {gesture: False for gesture in GestureInput}

        self._safe_combo = ComboTimer("SafeMode", self._config.safe_hold_time,
                                      lambda: self._is_held(GestureInput.TOGGLE_SAFE),
                                      clock=clock)
        self._field_combo = ComboTimer("FieldMode", self._config.button_delay,
                                       lambda: self._is_held(GestureInput.TOGGLE_FIELD)
                                       and not self._is_held(GestureInput.TOGGLE_GOAL),
                                       clock=clock)
        # Goal combo also depends on the camera, so it is driven directly from _update_goal_mode
        self._goal_combo = ComboTimer("GoalMode", self._config.button_delay, clock=clock)

    @property
    def state(self) -> ArbiterState:
        return self._state

    @property
    def mode(self) -> OrientationMode:
        return self._state.mode

    @property
    def safe_mode(self) -> bool:
        return self._state.safe_mode

    @property
    def speed_scale(self) -> float:
        return self._config.speed_safe if self._state.safe_mode else self._config.speed_normal

    @property
    def combos(self) -> tuple[ComboTimer, ComboTimer, ComboTimer]:
        return self._safe_combo, self._field_combo, self._goal_combo

    def _is_held(self, gesture: GestureInput) -> bool:
        return self._held[gesture]

    def update_heading_correction(self, intents: DriveIntents) -> float:
        """
        Ask the drivetrain how much rotation is needed to hold our heading. Goal mode
        steers off the camera instead, so there is no correction there.
        """
        if self._state.mode == OrientationMode.GOAL:
            correction = 0.0
        else:
            correction = self._drive.heading_hold_correction(self._config.heading_gain,
                                                             intents.forward,
                                                             intents.strafe,
                                                             intents.rotation)
        self._state.heading_correction = correction
        return correction

    def update(self) -> None:
        """
        Run one cycle of the button state machines. Each button is read once per cycle.
        """
        self._held = {gesture: bool(supplier()) for gesture, supplier in self._buttons.items()}

        self._update_safe_mode()
        self._update_field_mode()
        self._update_goal_mode()
        self._update_heading_reset()

    def _set_mode(self, mode: OrientationMode) -> None:
        # Mode only. The toggle flags belong to their buttons
        logger.info(f"Switching to {mode.label}.")
        self._state.mode = mode

    def _update_safe_mode(self) -> None:
        if self._safe_combo.update():
            self._state.safe_mode = not self._state.safe_mode
            logger.info(f"Safemode is {'Enabled' if self._state.safe_mode else 'Disabled'}.")

    def _update_field_mode(self) -> None:
        if self._field_combo.update():
            self._state.field_oriented = not self._state.field_oriented
            self._set_mode(OrientationMode.FIELD if self._state.field_oriented else OrientationMode.ROBOT)

    def _update_goal_mode(self) -> None:
        requested = self._is_held(GestureInput.TOGGLE_GOAL) and not self._is_held(GestureInput.TOGGLE_FIELD)

        if not requested:
            self._goal_combo.reset()

        elif self._vision.is_target_valid():
            if self._goal_combo.update(True):
                self._state.goal_oriented = not self._state.goal_oriented
                self._set_mode(OrientationMode.GOAL if self._state.goal_oriented else OrientationMode.FIELD)
        else:
            # No target. Do not wait for the combo, fall back to field oriented right now.
            # Sent every cycle the button is held, the notify sink decides how often to show it
            self._goal_combo.reset()
            self._state.mode = OrientationMode.FIELD
            self._notify("No valid target to change drive mode. Switching to Field Oriented Mode")

    def _update_heading_reset(self) -> None:
        # Level triggered. Resetting an already reset gyro is harmless
        if self._is_held(GestureInput.RESET_HEADING):
            self._drive.reset_heading_reference()
            self._state.heading_correction = 0.0
            logger.debug("Gyro reset")
