from agriadvise.models.advice import SuggestCropsInput

from .rendering import (
    PLAIN_LANGUAGE_GUIDANCE,
    AdvicePrompt,
    format_number,
    language_section,
    optional_section,
    render,
)

SUGGEST_CROPS_PROMPT = """You are an AI-powered agriculture advisor helping farmers in India choose the best crops.

The user will provide seasons as 'Summer', 'Winter', or 'Rainy'. You must map these to the appropriate Indian agricultural seasons:
- 'Rainy' corresponds to the Kharif season (monsoon crops).
- 'Winter' corresponds to the Rabi season (winter crops).
- 'Summer' corresponds to the Zaid season (summer crops).

Based on the following conditions, recommend the most suitable crops to grow.
- Soil Type: {soil_type}
- Soil pH: {soil_ph}
- Average Temperature: {temperature}°C
- Rainfall: {rainfall} mm
- Season: {season}
- Region: {region}
{crop_section}{photo_section}
Provide four distinct outputs:
1.  **recommendedCrops**: Suggest a list of the most suitable crops. If a specific crop was provided, confirm its suitability.
2.  **fertilizers**: Suggest suitable fertilizers for the recommended crops.
3.  **irrigation**: Provide irrigation practices for the recommended crops.
4.  **pestManagement**: Offer pest management tips for the recommended crops.
{guidance}{language_section}"""

SPECIFIC_CROP_SECTION = """- Specific Crop: {crop}
Focus your recommendations on this specific crop ({crop}) if it is suitable for the other conditions.
"""

FARMLAND_IMAGE_SECTION = """- Farmland Image: attached to this request.
Use the image to visually assess the land and refine your recommendations.
"""


def build_suggest_crops_prompt(data: SuggestCropsInput) -> AdvicePrompt:
    has_photo = data.photo_data_uri is not None
    text = render(
        SUGGEST_CROPS_PROMPT,
        soil_type=data.soil_type,
        soil_ph=format_number(data.soil_ph),
        temperature=format_number(data.temperature),
        rainfall=format_number(data.rainfall),
        season=data.season.value,
        region=data.region,
        crop_section=optional_section(SPECIFIC_CROP_SECTION, crop=data.crop),
        photo_section=FARMLAND_IMAGE_SECTION if has_photo else "",
        guidance=PLAIN_LANGUAGE_GUIDANCE,
        language_section=language_section(data.language),
    )
    media = [data.photo_data_uri] if has_photo else []
    return AdvicePrompt(text=text, media=media)
