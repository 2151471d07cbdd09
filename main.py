"""
Pixel Flipbook
Main entry point for the application

A small pixel-art sprite editor with frame-by-frame animation playback.
"""

import sys
from PyQt6.QtWidgets import QApplication
from ui.main_window import FlipbookEditorWindow


def main():
    """Main entry point"""
    app = QApplication(sys.argv)
    app.setStyle('Fusion')

    window = FlipbookEditorWindow()
    if len(sys.argv) > 1:
        window.load_project_file(sys.argv[1])
    window.show()

    sys.exit(app.exec())


if __name__ == '__main__':
    main()
