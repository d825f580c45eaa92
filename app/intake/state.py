from collections.abc import Callable

from app.intake.models import PipelineState
from app.logging.logger import Log

StateListener = Callable[[PipelineState], None]


class PipelineStateStore:
    """Holds the single live PipelineState and notifies subscribers on change.

    The pipeline is the only writer. Listeners receive every published state
    in order and must not publish back into the store. A listener that raises
    is logged and skipped; it never affects the run or the other listeners.
    """

    def __init__(self, initial: PipelineState | None = None) -> None:
        self._state = initial if initial is not None else PipelineState()
        self._listeners: list[StateListener] = []

    @property
    def state(self) -> PipelineState:
        return self._state

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a listener and return a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def publish(self, state: PipelineState) -> None:
        self._state = state
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                Log.exception(f"State listener failed on {state.status.value}")
