import base64
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum


@dataclass(frozen=True)
class UploadedAsset:
    """A user-selected file held in memory."""

    filename: str
    media_type: str
    data: bytes

    @property
    def size_bytes(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class EncodedImage:
    """Text-safe, self-describing form of an asset: ``data:<type>;base64,<payload>``."""

    media_type: str
    payload: str

    @classmethod
    def from_asset(cls, asset: UploadedAsset) -> "EncodedImage":
        return cls(
            media_type=asset.media_type,
            payload=base64.b64encode(asset.data).decode("ascii"),
        )

    @property
    def data_url(self) -> str:
        return f"data:{self.media_type};base64,{self.payload}"


@dataclass(frozen=True)
class AnalysisResult:
    """Free-form text produced by the analysis provider for one image."""

    text: str


@dataclass(frozen=True)
class PersistedRecord:
    """Row written to the result store after a successful analysis."""

    image_url: str
    analysis: str
    processed_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class PipelineStatus(str, Enum):
    IDLE = "idle"
    READING = "reading"
    ANALYZING = "analyzing"
    PERSISTING = "persisting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class PipelineState:
    """Snapshot of pipeline progress exposed to the presentation layer.

    Each transition returns a new value; nothing is mutated in place.
    """

    status: PipelineStatus = PipelineStatus.IDLE
    image: EncodedImage | None = None
    analysis: str | None = None
    error: str | None = None

    @property
    def loading(self) -> bool:
        return self.status in (
            PipelineStatus.READING,
            PipelineStatus.ANALYZING,
            PipelineStatus.PERSISTING,
        )

    def reading(self) -> "PipelineState":
        # A new selection wipes the previous image, result and error.
        return PipelineState(status=PipelineStatus.READING)

    def analyzing(self, image: EncodedImage) -> "PipelineState":
        return replace(self, status=PipelineStatus.ANALYZING, image=image)

    def persisting(self, analysis: str) -> "PipelineState":
        return replace(self, status=PipelineStatus.PERSISTING, analysis=analysis)

    def succeeded(self) -> "PipelineState":
        return replace(self, status=PipelineStatus.SUCCEEDED, error=None)

    def failed(self, message: str) -> "PipelineState":
        return replace(self, status=PipelineStatus.FAILED, analysis=None, error=message)
