"""Numbered section handling for analysis text.

The prompt asks for four sections introduced by "1)".."4)". Providers do not
always comply, so this module only reports on structure and never rejects.
"""

SECTION_TITLES: tuple[str, ...] = (
    "Materials Identified",
    "Environmental Impact",
    "CO2 Emissions Estimate",
    "Sustainable Alternatives",
)
SECTION_PREFIXES: tuple[str, ...] = tuple(f"{n})" for n in range(1, len(SECTION_TITLES) + 1))


def is_section_heading(line: str) -> bool:
    return line.startswith(SECTION_PREFIXES)


def missing_sections(text: str) -> list[str]:
    """Titles of the expected sections whose numbered prefix never starts a line."""
    present = {line[:2] for line in text.splitlines() if is_section_heading(line)}
    return [
        title
        for prefix, title in zip(SECTION_PREFIXES, SECTION_TITLES)
        if prefix not in present
    ]
