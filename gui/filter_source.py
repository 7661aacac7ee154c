from PyQt6.QtCore import QObject, pyqtSignal


class FilterTextSource(QObject):
    """
    Shared search text of the routes menu.
    Emits text_changed only when the value really changes.
    """
    text_changed = pyqtSignal(str)

    def __init__(self, text: str = "", parent: QObject = None):
        super().__init__(parent)
        self._text = text

    def text(self) -> str:
        return self._text

    def set_text(self, text: str):
        text = text or ""
        if text == self._text:
            return
        self._text = text
        self.text_changed.emit(text)

    def clear(self):
        self.set_text("")
