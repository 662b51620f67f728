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
from typing import Optional

from commands2 import Subsystem
from ntcore import NetworkTableInstance
from wpilib import SmartDashboard, Timer
from wpimath.controller import PIDController

from lib_5973.constants import DASHBOARD_UPDATE_DIVISOR

logger = logging.getLogger(__name__)

HEARTBEAT_TIMEOUT = 5.0  # no heartbeat for 5s => stale camera


class LimelightCamera(Subsystem):
    """
    Limelight camera as seen over NetworkTables. For teleop we only need to know if
    it sees a target and how far off center (tx, degrees) that target is.
    """
    def __init__(self, name: Optional[str] = "limelight",
                 instance: Optional[NetworkTableInstance] = None,
                 kp: float = 0.02, ki: float = 0.0, kd: float = 0.0) -> None:
        super().__init__()

        self.name = name
        self._counter = 0

        instance = instance or NetworkTableInstance.getDefault()
        self.table = instance.getTable(self.name)

        self.tv = self.table.getDoubleTopic("tv").getEntry(0.0)
        self.tx = self.table.getDoubleTopic("tx").getEntry(0.0)
        self.ty = self.table.getDoubleTopic("ty").getEntry(0.0)
        self.ta = self.table.getDoubleTopic("ta").getEntry(0.0)
        self.hb = self.table.getIntegerTopic("hb").getEntry(0)

        self.lastHeartbeat = 0
        self.lastHeartbeatTime = 0.0
        self.heartbeating = False

        # Steer so that the target is in the center of the image
        self._x_pid = PIDController(kp, ki, kd)
        self._x_pid.setSetpoint(0.0)

    def getX(self) -> float:
        return self.tx.get()

    def getHB(self) -> int:
        return self.hb.get()

    def is_target_valid(self) -> bool:
        return self.tv.get() >= 1.0

    def steering_correction(self) -> float:
        """
        Rotation needed to center the target. With no target we do not steer.

        A target to the right (positive tx) gives a positive correction. The drive
        command subtracts it, which turns us clockwise toward the target.
        """
        if not self.is_target_valid():
            self._x_pid.reset()
            return 0.0

        return -self._x_pid.calculate(self.getX())

    def periodic(self) -> None:
        now = Timer.getFPGATimestamp()
        heartbeat = self.getHB()

        if heartbeat != self.lastHeartbeat:
            self.lastHeartbeat = heartbeat
            self.lastHeartbeatTime = now

        heartbeating = now < self.lastHeartbeatTime + HEARTBEAT_TIMEOUT
        if heartbeating != self.heartbeating:
            logger.warning(f"Camera {self.name}: {'UPDATING' if heartbeating else 'NO LONGER UPDATING'}")

        self.heartbeating = heartbeating
        self._counter += 1

        self.dashboard_periodic()

    def dashboard_initialize(self) -> None:
        SmartDashboard.putString('Camera/name', self.name)
        SmartDashboard.putString('Camera/type', "Limelight")

    def dashboard_periodic(self) -> None:
        if self._counter % DASHBOARD_UPDATE_DIVISOR == 0:
            SmartDashboard.putString('Camera/heartbeat', "Alive" if self.heartbeating else "Dead")
            SmartDashboard.putNumber('Camera/last-heartbeat', self.lastHeartbeatTime)
            SmartDashboard.putBoolean('Camera/target-valid', self.is_target_valid())
            SmartDashboard.putNumber('Camera/tx', self.tx.get())
            SmartDashboard.putNumber('Camera/ty', self.ty.get())
            SmartDashboard.putNumber('Camera/ta', self.ta.get())
