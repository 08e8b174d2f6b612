from agriadvise.models.advice import DiagnosePlantHealthInput

from .rendering import AdvicePrompt, language_section, render

DIAGNOSE_PLANT_HEALTH_PROMPT = """You are an expert plant pathologist and botanist. Your task is to analyze an image of a plant, identify it, assess its health, and provide a detailed diagnosis and treatment plan.

Analyze the attached image.

1.  **Identification:** Determine if the image contains a plant. If it does, identify the common name of the plant. If it is not a plant, set 'isPlant' to false and stop.
2.  **Health Assessment:** Examine the plant for any signs of disease, pests, or nutrient deficiencies. Determine if the plant is healthy or not.
3.  **Diagnosis:** If the plant is not healthy, identify the specific disease, pest, or issue. If the plant is healthy, state that clearly.
4.  **Remedy:** Provide a clear, step-by-step treatment plan to resolve the identified issue. If the plant is healthy, provide a simple statement that no remedy is needed.
5.  **Care Tips:** Provide a list of general care tips for this specific type of plant to help the user maintain its health and prevent future problems.

Your response must be structured according to the output schema.
{language_section}"""


def build_plant_health_prompt(data: DiagnosePlantHealthInput) -> AdvicePrompt:
    return AdvicePrompt(
        text=render(
            DIAGNOSE_PLANT_HEALTH_PROMPT,
            language_section=language_section(data.language),
        ),
        media=[data.photo_data_uri],
    )
