from agriadvise.models.advice import SuggestFertilizersInput

from .rendering import AdvicePrompt, format_number, language_section, render

SUGGEST_FERTILIZERS_PROMPT = """You are an expert agricultural advisor. Based on the recommended crop, soil type and pH, suggest the best fertilizers to use.

Crop: {crop}
Soil Type: {soil_type}
Soil pH: {soil_ph}

Provide a concise list of fertilizer suggestions optimized for the specified conditions.
{language_section}"""


def build_suggest_fertilizers_prompt(data: SuggestFertilizersInput) -> AdvicePrompt:
    return AdvicePrompt(
        text=render(
            SUGGEST_FERTILIZERS_PROMPT,
            crop=data.crop,
            soil_type=data.soil_type,
            soil_ph=format_number(data.soil_ph),
            language_section=language_section(data.language),
        )
    )
