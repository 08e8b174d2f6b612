from agriadvise.models.advice import AdviseOnIrrigationPracticesInput

from .rendering import AdvicePrompt, language_section, render

ADVISE_ON_IRRIGATION_PROMPT = """You are an expert agriculture advisor. Provide irrigation advice for the specified crop and location.

Crop: {crop}
Location: {location}

Format your response in a short, simple, and practical way that is easy for farmers to understand and apply.
Focus on the key irrigation practices that will optimize water usage and promote healthy crop growth.

Example Output:
Irrigation: Water deeply but infrequently, allowing the soil to dry slightly between waterings. Use drip irrigation to deliver water directly to the roots and minimize water loss through evaporation.
{language_section}"""


def build_irrigation_prompt(data: AdviseOnIrrigationPracticesInput) -> AdvicePrompt:
    return AdvicePrompt(
        text=render(
            ADVISE_ON_IRRIGATION_PROMPT,
            crop=data.crop,
            location=data.location,
            language_section=language_section(data.language),
        )
    )
