# ui/session_summary.py
from __future__ import annotations
from typing import Sequence

from PySide6.QtWidgets import QDialog, QVBoxLayout, QHBoxLayout, QLabel, QPushButton
import pyqtgraph as pg

from app.calculation import Metrics, rolling_wpm, smooth


class SessionSummary(QDialog):
    """Final stats plus a WPM-over-time graph built from per-second progress."""

    def __init__(
        self,
        metrics: Metrics,
        duration: int,
        progress: Sequence[int],
        parent=None,
    ):
        super().__init__(parent)
        self.setWindowTitle("Session Summary")
        self.resize(720, 420)

        root = QVBoxLayout(self)
        row = QHBoxLayout()
        for text in (
            f"WPM: {metrics.wpm}",
            f"Accuracy: {metrics.accuracy}%",
            f"Correct: {metrics.correct}",
            f"Incorrect: {metrics.incorrect}",
            f"Time: {duration}s",
        ):
            row.addWidget(QLabel(text, self))
        root.addLayout(row)

        plot = pg.PlotWidget()
        plot.setBackground(None)
        plot.setMenuEnabled(False)
        plot.setMouseEnabled(x=False, y=False)
        plot.hideButtons()
        plot.showGrid(x=False, y=True, alpha=0.08)
        plot.setLabel("left", "WPM")
        plot.setLabel("bottom", "Time (s)")

        series = smooth(rolling_wpm(list(progress)))
        plot.plot(
            list(range(1, len(series) + 1)),
            series,
            pen=pg.mkPen(color=(200, 200, 255), width=2),
            symbol=None,
        )
        root.addWidget(plot, stretch=1)

        btn = QPushButton("OK", self)
        btn.clicked.connect(self.accept)
        root.addWidget(btn)
