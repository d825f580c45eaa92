from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

from app.intake.models import AnalysisResult, EncodedImage, PersistedRecord, UploadedAsset


@dataclass(slots=True)
class PipelineContext:
    source: Path
    media_type: str | None = None
    asset: UploadedAsset | None = None
    image: EncodedImage | None = None
    analysis: AnalysisResult | None = None
    object_name: str = ""
    upload_path: str = ""
    public_url: str = ""
    record: PersistedRecord | None = None
    record_id: int | None = None
    archived_path: str = ""


class PipelineStep(ABC):
    @abstractmethod
    async def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
