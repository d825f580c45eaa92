"""Console rendering of pipeline state for the command-line entry point."""

import sys
from typing import TextIO

from app.analysis.sections import is_section_heading
from app.intake.models import PipelineState, PipelineStatus
from app.presentation.notifications import Notification
from app.presentation.suggestions import generate_suggestions

_BOLD = "\033[1m"
_RESET = "\033[0m"

_PROGRESS_LABELS = {
    PipelineStatus.READING: "Reading image...",
    PipelineStatus.ANALYZING: "Analyzing materials...",
    PipelineStatus.PERSISTING: "Saving results...",
}


def render_analysis(text: str, *, color: bool = False) -> str:
    """Render analysis text, emphasising lines that open a numbered section."""
    lines = []
    for line in text.split("\n"):
        if is_section_heading(line):
            line = f"{_BOLD}{line}{_RESET}" if color else line.upper()
        lines.append(line)
    return "\n".join(lines)


class ConsoleObserver:
    """Writes each published PipelineState to a text stream."""

    def __init__(self, stream: TextIO | None = None, *, color: bool | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdout
        self._color = color if color is not None else self._stream.isatty()
        self.notifications: list[Notification] = []

    def __call__(self, state: PipelineState) -> None:
        label = _PROGRESS_LABELS.get(state.status)
        if label is not None:
            self._write(label)
        elif state.status is PipelineStatus.SUCCEEDED and state.analysis:
            self._render_success(state.analysis)
        elif state.status is PipelineStatus.FAILED and state.error:
            self._render_failure(state.error)

    def _render_success(self, analysis: str) -> None:
        self._write("")
        self._write(render_analysis(analysis, color=self._color))
        suggestions = generate_suggestions(analysis)
        if suggestions:
            self._write("")
            self._write("Quick suggestions:")
            for suggestion in suggestions:
                self._write(f"  - {suggestion.text}")

    def _render_failure(self, message: str) -> None:
        notification = Notification(message=message)
        self.notifications.append(notification)
        self._write(f"Error: {notification.message}")

    def _write(self, text: str) -> None:
        print(text, file=self._stream)
