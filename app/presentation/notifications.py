from dataclasses import dataclass

AUTO_HIDE_SECONDS = 6.0


@dataclass
class Notification:
    """A dismissible message that expires after ``auto_hide_seconds``."""

    message: str
    severity: str = "error"
    auto_hide_seconds: float = AUTO_HIDE_SECONDS
    dismissed: bool = False

    def dismiss(self) -> None:
        self.dismissed = True

    def is_visible(self, elapsed_seconds: float) -> bool:
        return not self.dismissed and elapsed_seconds < self.auto_hide_seconds
