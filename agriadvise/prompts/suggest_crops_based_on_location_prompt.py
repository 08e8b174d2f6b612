from agriadvise.models.advice import SuggestCropsBasedOnLocationInput

from .rendering import PLAIN_LANGUAGE_GUIDANCE, AdvicePrompt, language_section, render

SUGGEST_CROPS_BASED_ON_LOCATION_PROMPT = """You are an AI-powered agriculture advisor helping farmers choose the best crops.

Recommend the most suitable crops based on the location: {location}. Also, suggest correct fertilizers, irrigation practices, and basic pest management for the chosen crops.
{guidance}
Present the output in a structured format like:

✅ Recommended Crops:
🌱 Fertilizers:
💧 Irrigation:
🛡️ Pest Management:
{language_section}"""


def build_suggest_crops_based_on_location_prompt(
    data: SuggestCropsBasedOnLocationInput,
) -> AdvicePrompt:
    return AdvicePrompt(
        text=render(
            SUGGEST_CROPS_BASED_ON_LOCATION_PROMPT,
            location=data.location,
            guidance=PLAIN_LANGUAGE_GUIDANCE,
            language_section=language_section(data.language),
        )
    )
