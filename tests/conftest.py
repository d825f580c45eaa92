from pathlib import Path

import pytest

FOUR_SECTION_ANALYSIS = (
    "1) Materials Identified\n"
    "Corrugated cardboard box, LDPE shrink film.\n"
    "2) Environmental Impact\n"
    "Cardboard is recyclable; film is rarely collected kerbside.\n"
    "3) CO2 Emissions Estimate\n"
    "About 0.9 kg CO2e per kg of cardboard.\n"
    "4) Sustainable Alternatives\n"
    "Paper tape and recycled-content boxes."
)

# SOI + APP0 JFIF header + EOI; enough for a file that looks like a JPEG.
JPEG_BYTES = (
    b"\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00"
    b"\xff\xd9"
)


@pytest.fixture()
def analysis_text() -> str:
    return FOUR_SECTION_ANALYSIS


@pytest.fixture()
def jpeg_bytes() -> bytes:
    return JPEG_BYTES


@pytest.fixture()
def photo_path(tmp_path: Path) -> Path:
    """A small JPEG file named photo.jpg."""
    path = tmp_path / "photo.jpg"
    path.write_bytes(JPEG_BYTES)
    return path
