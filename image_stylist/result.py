from dataclasses import dataclass
from typing import Optional

from image_stylist.constants import (
    KEY_IS_STYLE_MATCH,
    KEY_OBJECTIVE_DESCRIPTION,
    KEY_OCCASION_ANALYSIS,
    KEY_OUTFIT_SUGGESTION,
    KEY_STYLE_ANALYSIS,
)


@dataclass(frozen=True)
class StyleAnalysisResult:
    """Validated verdict for one product. Only built once all five keys are present."""

    objective_description: str
    style_analysis: str
    is_style_match: bool
    outfit_suggestion: Optional[str]
    occasion_analysis: str

    def to_dict(self) -> dict:
        return {
            KEY_OBJECTIVE_DESCRIPTION: self.objective_description,
            KEY_STYLE_ANALYSIS: self.style_analysis,
            KEY_IS_STYLE_MATCH: self.is_style_match,
            KEY_OUTFIT_SUGGESTION: self.outfit_suggestion,
            KEY_OCCASION_ANALYSIS: self.occasion_analysis,
        }
