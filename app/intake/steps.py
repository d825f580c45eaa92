from app.analysis.base import BaseAnalyzer
from app.database.repositories.material_analysis_repository import MaterialAnalysisRepository
from app.intake.exceptions import PersistenceError
from app.intake.file_reader import FileReader
from app.intake.models import PersistedRecord
from app.intake.pipeline import PipelineContext, PipelineStep
from app.logging.logger import Log
from app.storage.base import BaseObjectStorage
from app.storage.object_paths import PROCESSED_STAGE, UPLOADS_STAGE, object_name, stage_path


class ReadImageStep(PipelineStep):
    def __init__(self, file_reader: FileReader) -> None:
        self._file_reader = file_reader

    async def run(self, context: PipelineContext) -> PipelineContext:
        asset, image = await self._file_reader.read_encoded(
            context.source, context.media_type
        )
        context.asset = asset
        context.image = image
        Log.info(f"Read {asset.size_bytes} bytes from {asset.filename} ({asset.media_type})")
        return context


class AnalyzeImageStep(PipelineStep):
    def __init__(self, analyzer: BaseAnalyzer) -> None:
        self._analyzer = analyzer

    async def run(self, context: PipelineContext) -> PipelineContext:
        if context.image is None:
            raise ValueError("PipelineContext.image must be set before analysis")
        context.analysis = await self._analyzer.analyze(context.image)
        return context


class UploadAssetStep(PipelineStep):
    def __init__(self, storage: BaseObjectStorage) -> None:
        self._storage = storage

    async def run(self, context: PipelineContext) -> PipelineContext:
        if context.asset is None or context.analysis is None:
            raise ValueError("PipelineContext.asset and analysis must be set before upload")
        context.object_name = object_name(context.asset.filename)
        context.upload_path = stage_path(UPLOADS_STAGE, context.object_name)
        await self._storage.upload(
            context.upload_path, context.asset.data, context.asset.media_type
        )
        return context


class RecordResultStep(PipelineStep):
    def __init__(
        self,
        storage: BaseObjectStorage,
        repository: MaterialAnalysisRepository,
    ) -> None:
        self._storage = storage
        self._repository = repository

    async def run(self, context: PipelineContext) -> PipelineContext:
        if not context.upload_path or context.analysis is None:
            raise ValueError("PipelineContext.upload_path and analysis must be set before recording")
        context.public_url = self._storage.get_public_url(context.upload_path)
        context.record = PersistedRecord(
            image_url=context.public_url,
            analysis=context.analysis.text,
        )
        context.record_id = await self._repository.insert(context.record)
        Log.info(f"Recorded analysis {context.record_id} for {context.public_url}")
        return context


class ArchiveAssetStep(PipelineStep):
    """Moves the stored asset to the processed area.

    The record is already committed when this runs, so a failed move is
    logged and the run still succeeds.
    """

    def __init__(self, storage: BaseObjectStorage) -> None:
        self._storage = storage

    async def run(self, context: PipelineContext) -> PipelineContext:
        if not context.upload_path:
            raise ValueError("PipelineContext.upload_path must be set before archiving")
        dest_path = stage_path(PROCESSED_STAGE, context.object_name)
        try:
            await self._storage.move(context.upload_path, dest_path)
        except PersistenceError as exc:
            Log.warning(f"Could not move {context.upload_path} to {dest_path}: {exc}")
            return context
        context.archived_path = dest_path
        return context
