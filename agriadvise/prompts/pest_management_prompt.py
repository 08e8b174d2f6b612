from agriadvise.models.advice import SuggestPestManagementStrategiesInput

from .rendering import AdvicePrompt, language_section, render

PEST_MANAGEMENT_PROMPT = """You are an expert agriculture advisor. Provide basic pest management strategies for the following crop in the specified region.

Crop: {crop}
Region: {region}
{language_section}
Pest Management Strategies:"""


def build_pest_management_prompt(
    data: SuggestPestManagementStrategiesInput,
) -> AdvicePrompt:
    return AdvicePrompt(
        text=render(
            PEST_MANAGEMENT_PROMPT,
            crop=data.crop,
            region=data.region,
            language_section=language_section(data.language),
        )
    )
