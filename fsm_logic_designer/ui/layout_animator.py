# fsm_logic_designer/ui/layout_animator.py
from __future__ import annotations

import logging
from typing import Optional

from PyQt6.QtCore import QObject, QTimer, pyqtSignal, pyqtSlot

from ..core.fsm import FSM
from ..core.movable import Movable
from ..utils import config

logger = logging.getLogger(__name__)


class LayoutAnimator(QObject):
    """
    Drives the force layout of an FSM from a QTimer.
    - one relax step per timer tick
    - an element being dragged can be fixed so the graph relaxes around it
    - the timer stops by itself once the graph has settled, if requested
    """
    tick_processed = pyqtSignal(int)
    layout_settled = pyqtSignal()

    def __init__(self, fsm: FSM, parent: QObject | None = None):
        super().__init__(parent)
        self.fsm = fsm
        self.dt: float = config.LAYOUT_TIMESTEP
        self.move_states: bool = True
        self.stop_when_settled: bool = False
        self.settle_threshold: float = 0.01
        self.tick_count: int = 0
        self.last_displacement: float = 0.0
        self._fixed: Optional[Movable] = None

        self._timer = QTimer(self)
        self._timer.setInterval(config.LAYOUT_TICK_INTERVAL_MS)
        self._timer.timeout.connect(self.tick)

    def set_fsm(self, fsm: FSM):
        self.fsm = fsm
        self._fixed = None

    def set_fixed(self, item: Optional[Movable]):
        """Excludes `item` from being moved, or clears the exclusion with None."""
        self._fixed = item

    @property
    def fixed(self) -> Optional[Movable]:
        return self._fixed

    def is_running(self) -> bool:
        return self._timer.isActive()

    def start(self):
        if not self._timer.isActive():
            logger.debug("LayoutAnimator: started.")
            self._timer.start()

    def stop(self):
        if self._timer.isActive():
            self._timer.stop()
            logger.debug(f"LayoutAnimator: stopped after {self.tick_count} ticks.")

    @pyqtSlot()
    def tick(self):
        self.last_displacement = self.fsm.relax(self.dt, self.move_states, self._fixed)
        self.tick_count += 1
        self.tick_processed.emit(self.tick_count)
        if self.stop_when_settled and self.last_displacement < self.settle_threshold:
            self.stop()
            self.layout_settled.emit()
