from dataclasses import dataclass


@dataclass(frozen=True)
class Suggestion:
    text: str


DEFAULT_SUGGESTIONS: tuple[Suggestion, ...] = (
    Suggestion(text="Consider using recycled or biodegradable materials"),
    Suggestion(text="Look for products with minimal packaging"),
    Suggestion(text="Choose products with recyclable components"),
)


def generate_suggestions(analysis: str | None) -> list[Suggestion]:
    """General sustainability tips shown alongside an analysis."""
    if not analysis:
        return []
    return list(DEFAULT_SUGGESTIONS)
