from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from app.analysis.factory import AnalyzerFactory
from app.config.settings import Settings
from app.database.repositories.material_analysis_repository import MaterialAnalysisRepository
from app.intake.exceptions import IntakeError, PipelineBusyError
from app.intake.file_reader import FileReader
from app.intake.models import PipelineState, PipelineStatus
from app.intake.pipeline import PipelineContext, PipelineStep
from app.intake.state import PipelineStateStore
from app.intake.steps import (
    AnalyzeImageStep,
    ArchiveAssetStep,
    ReadImageStep,
    RecordResultStep,
    UploadAssetStep,
)
from app.logging.logger import Log
from app.storage.factory import StorageFactory


@dataclass(frozen=True)
class Stage:
    """A group of steps reported to the presentation layer under one status."""

    status: PipelineStatus
    steps: tuple[PipelineStep, ...]


class IntakePipeline:
    """Drives one selected file through read -> analyze -> persist.

    Each stage runs only after the previous one has finished. The first
    error ends the run in FAILED; no later step is invoked and nothing is
    retried. Loading is asserted from READING until the single terminal
    state is published.
    """

    def __init__(
        self,
        stages: Sequence[Stage],
        store: PipelineStateStore | None = None,
    ) -> None:
        self._stages = tuple(stages)
        self._store = store if store is not None else PipelineStateStore()
        self._running = False

    @property
    def store(self) -> PipelineStateStore:
        return self._store

    @property
    def busy(self) -> bool:
        return self._running

    async def run(self, source: Path | None, media_type: str | None = None) -> PipelineState:
        """Process a selected file and return the terminal state.

        A missing selection is a no-op and returns the current state unchanged.

        Raises:
            PipelineBusyError: if another run is still in flight.
        """
        if source is None:
            return self._store.state
        if self._running:
            raise PipelineBusyError("An upload is already in progress")

        self._running = True
        Log.info(f"Processing {source.name}")
        context = PipelineContext(source=source, media_type=media_type)
        state = self._store.state
        try:
            for stage in self._stages:
                state = self._enter(state, stage.status, context)
                self._store.publish(state)
                for step in stage.steps:
                    context = await step.run(context)
            state = state.succeeded()
            Log.info(f"Finished {source.name}: record {context.record_id}")
        except IntakeError as exc:
            Log.error(f"Error processing {source.name}: {exc!r} (cause: {exc.__cause__!r})")
            state = state.failed(str(exc))
        except Exception as exc:
            Log.exception(f"Unexpected error processing {source.name}")
            state = state.failed(str(exc) or type(exc).__name__)
        finally:
            self._running = False

        self._store.publish(state)
        return state

    @staticmethod
    def _enter(
        state: PipelineState, status: PipelineStatus, context: PipelineContext
    ) -> PipelineState:
        if status is PipelineStatus.READING:
            return state.reading()
        if status is PipelineStatus.ANALYZING:
            if context.image is None:
                raise ValueError("Cannot analyze before the image is read")
            return state.analyzing(context.image)
        if status is PipelineStatus.PERSISTING:
            if context.analysis is None:
                raise ValueError("Cannot persist before the analysis is available")
            return state.persisting(context.analysis.text)
        raise ValueError(f"Status {status.value!r} cannot start a stage")


def build_stages(
    read_step: PipelineStep,
    analyze_step: PipelineStep,
    persist_steps: Sequence[PipelineStep],
) -> list[Stage]:
    """Group steps into the READING, ANALYZING and PERSISTING stages, in order."""
    return [
        Stage(PipelineStatus.READING, (read_step,)),
        Stage(PipelineStatus.ANALYZING, (analyze_step,)),
        Stage(PipelineStatus.PERSISTING, tuple(persist_steps)),
    ]


def build_pipeline(
    settings: Settings,
    store: PipelineStateStore | None = None,
) -> IntakePipeline:
    """Build an IntakePipeline with all required adapters."""
    analyzer = AnalyzerFactory.create(settings)
    storage = StorageFactory.create(settings)
    repository = MaterialAnalysisRepository(settings.records_table)
    stages = build_stages(
        ReadImageStep(FileReader()),
        AnalyzeImageStep(analyzer),
        [
            UploadAssetStep(storage),
            RecordResultStep(storage, repository),
            ArchiveAssetStep(storage),
        ],
    )
    return IntakePipeline(stages, store=store)
