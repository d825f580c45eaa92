from dataclasses import dataclass
from datetime import datetime


@dataclass
class MaterialAnalysisRecord:
    """Represents a row from the material_analysis table."""

    id: int
    image_url: str
    analysis: str
    processed_at: datetime
    created_at: datetime | None = None
