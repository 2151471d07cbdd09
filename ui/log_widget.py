"""
Log Widget
Displays log messages with color-coded severity levels
"""

from PyQt6.QtWidgets import QTextEdit


class LogWidget(QTextEdit):
    """Widget for displaying logs"""

    LEVEL_ORDER = {
        "DEBUG": 0,
        "INFO": 1,
        "SUCCESS": 1,
        "WARNING": 2,
        "ERROR": 3,
    }

    LEVEL_COLORS = {
        "DEBUG": "gray",
        "INFO": "black",
        "WARNING": "orange",
        "ERROR": "red",
        "SUCCESS": "green",
    }

    def __init__(self, parent=None, minimum_level: str = "INFO"):
        super().__init__(parent)
        self.setReadOnly(True)
        self.setMaximumHeight(120)
        self.setUndoRedoEnabled(False)
        self.minimum_level = minimum_level

    def set_minimum_level(self, level: str):
        if level.upper() in self.LEVEL_ORDER:
            self.minimum_level = level.upper()

    def log(self, message: str, level: str = "INFO"):
        """
        Add a log message

        Args:
            message: Message to log
            level: Severity level (DEBUG, INFO, WARNING, ERROR, SUCCESS)
        """
        level = level.upper()
        rank = self.LEVEL_ORDER.get(level, 1)
        if rank < self.LEVEL_ORDER.get(self.minimum_level, 1):
            return
        color = self.LEVEL_COLORS.get(level, "black")
        self.append(f'<span style="color: {color};">[{level}] {message}</span>')
        self.verticalScrollBar().setValue(self.verticalScrollBar().maximum())
