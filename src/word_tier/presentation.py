"""Terminal rendering of analyzed sentences.

Easy words print unstyled, medium words orange and underlined, hard words
blue and underlined. Every token is followed by one space so that printed
columns line up with the offsets held by the PositionIndex.
"""

from rich.panel import Panel
from rich.style import Style
from rich.text import Text

from word_tier.core.session import AnalysisResult, WordDefinition
from word_tier.lexical.classifier import DifficultyTier

TIER_STYLES: dict[DifficultyTier, Style] = {
    DifficultyTier.EASY: Style.null(),
    DifficultyTier.MEDIUM: Style(color="dark_orange", underline=True),
    DifficultyTier.HARD: Style(color="blue", underline=True),
}

WINDOW_TITLE = "Smart Word Difficulty Detector"


def render_sentence(result: AnalysisResult) -> Text:
    """Build styled text for an analysis, one run per token."""
    text = Text()
    for analyzed in result.tokens:
        text.append(analyzed.display_text, style=TIER_STYLES[analyzed.tier])
        text.append(" ")
    return text


def render_legend() -> Text:
    """One-line key of the tier styles."""
    legend = Text()
    for tier in DifficultyTier:
        legend.append(tier.label, style=TIER_STYLES[tier])
        legend.append("  ")
    return legend


def render_ruler(width: int) -> Text:
    """Offset ruler to print under a sentence (a digit every ten columns)."""
    marks = []
    for column in range(width):
        marks.append(str(column // 10 % 10) if column % 10 == 0 else "·")
    return Text("".join(marks), style="dim")


def render_definition(definition: WordDefinition) -> Panel:
    """Popup-style panel for a clicked word."""
    if not definition.found:
        return Panel(
            Text(definition.definition, style="yellow"),
            title=definition.word,
            expand=False,
        )
    return Panel(
        Text(definition.definition),
        title=Text(definition.word, style="bold"),
        expand=False,
    )
