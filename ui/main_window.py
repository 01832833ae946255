# ui/main_window.py
from __future__ import annotations

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QLabel, QPushButton, QButtonGroup
)
from PySide6.QtCore import Qt

from app.calculation import Metrics
from app.config import DEFAULT_DURATION, DURATIONS
from app.words import WordStream
from ui.session_summary import SessionSummary
from ui.test_ui import TestUI


class MainWindow(QMainWindow):
    def __init__(self, words: WordStream | None = None):
        super().__init__()
        self.setWindowTitle("Smashkeys")
        self.resize(1200, 720)

        root = QWidget(self)
        root_v = QVBoxLayout(root)
        root_v.setContentsMargins(16, 40, 16, 16)
        root_v.setSpacing(24)
        self._build_top_bar(root_v)

        self.test = TestUI(words=words, duration=DEFAULT_DURATION, parent=self)
        self.test.finished.connect(self._on_test_finished)

        test_h = QHBoxLayout()
        test_h.addStretch(1)
        test_h.addWidget(self.test, 1)
        test_h.addStretch(1)
        root_v.addLayout(test_h, 1)
        self.setCentralWidget(root)

        # buttons never take focus, so keys land on the typing surface
        self.setFocusPolicy(Qt.NoFocus)
        self.test.setFocus()

        self.setStyleSheet(
            f"""
            QWidget {{ background: #0a0a0a; color: #f3f4f6; }}
            QLabel#lblTimer, QLabel#lblStatus {{ color: #d1d5db; font-size: 16px; }}
            {self._topbar_qss}
            """
        )

    # ---------------- Top Bar ----------------
    def _build_top_bar(self, parent_layout):
        bar = QWidget(self)
        bar.setObjectName("TopBar")
        h = QHBoxLayout(bar)
        h.setContentsMargins(14, 16, 14, 16)
        h.setSpacing(10)

        title = QLabel("Smash those Keys!!", bar)
        title.setStyleSheet("font-size: 22px; font-weight: 600;")
        h.addWidget(title)
        h.addStretch(1)

        self.duration_group = QButtonGroup(self)
        self.duration_group.setExclusive(True)
        for seconds in DURATIONS:
            btn = QPushButton(f"{seconds}s", bar)
            btn.setObjectName("TopBtn")
            btn.setCheckable(True)
            btn.setChecked(seconds == DEFAULT_DURATION)
            btn.setFocusPolicy(Qt.NoFocus)
            self.duration_group.addButton(btn, seconds)
            h.addWidget(btn)
        self.duration_group.idClicked.connect(self._on_duration)

        btn_restart = QPushButton("Restart", bar)
        btn_restart.setObjectName("TopBtn")
        btn_restart.setFocusPolicy(Qt.NoFocus)
        btn_restart.clicked.connect(self._on_restart)
        h.addWidget(btn_restart)

        parent_layout.addWidget(bar)

        self._topbar_qss = """
        QWidget#TopBar {
            background: rgba(255,255,255,0.04);
            border: 1px solid rgba(255,255,255,0.08);
            border-radius: 14px;
        }
        QPushButton#TopBtn {
            background: transparent;
            border: 1px solid rgba(255,255,255,0.10);
            border-radius: 9px;
            padding: 6px 12px;
        }
        QPushButton#TopBtn:hover {
            border-color: rgba(255,255,255,0.32);
            background: rgba(255,255,255,0.06);
        }
        QPushButton#TopBtn:checked { background: #ffffff; color: #000000; }
        """

    # ---------------- Controls ----------------
    def _on_duration(self, seconds: int):
        self.setWindowTitle("Smashkeys")
        self.test.set_duration(seconds)

    def _on_restart(self):
        self.setWindowTitle("Smashkeys")
        self.test.restart()

    def keyPressEvent(self, ev):
        # global capture path: typing works even when the surface lost focus
        if self.test.handle_global_key(ev):
            ev.accept()
            return
        super().keyPressEvent(ev)

    # ---------------- Result ----------------
    def _on_test_finished(self, metrics: Metrics):
        self.setWindowTitle(f"Smashkeys — {metrics.wpm} WPM")
        dlg = SessionSummary(
            metrics,
            duration=self.test.engine.duration,
            progress=list(self.test.engine.progress),
            parent=self,
        )
        dlg.open()
