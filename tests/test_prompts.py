from agriadvise.models.advice import (
    AdviseOnIrrigationPracticesInput,
    DiagnosePlantHealthInput,
    GetMainCropForRegionInput,
    SuggestCropsBasedOnLocationInput,
    SuggestCropsInput,
    SuggestFertilizersInput,
    SuggestPestManagementStrategiesInput,
)
from agriadvise.prompts.fertilizer_prompt import build_suggest_fertilizers_prompt
from agriadvise.prompts.irrigation_prompt import build_irrigation_prompt
from agriadvise.prompts.main_crop_prompt import build_main_crop_prompt
from agriadvise.prompts.pest_management_prompt import build_pest_management_prompt
from agriadvise.prompts.plant_health_prompt import build_plant_health_prompt
from agriadvise.prompts.suggest_crops_based_on_location_prompt import (
    build_suggest_crops_based_on_location_prompt,
)
from agriadvise.prompts.suggest_crops_prompt import build_suggest_crops_prompt

from .conftest import PNG_DATA_URI


def test_suggest_crops_prompt_interpolates_conditions(suggest_crops_input):
    prompt = build_suggest_crops_prompt(SuggestCropsInput.model_validate(suggest_crops_input))
    assert "- Soil Type: Alluvial" in prompt.text
    assert "- Soil pH: 6.5" in prompt.text
    assert "- Average Temperature: 28°C" in prompt.text
    assert "- Rainfall: 700 mm" in prompt.text
    assert "- Season: Rainy" in prompt.text
    assert "- Region: Punjab" in prompt.text
    assert "Kharif" in prompt.text
    assert prompt.media == []


def test_suggest_crops_prompt_focuses_on_specific_crop(suggest_crops_input):
    data = SuggestCropsInput.model_validate({**suggest_crops_input, "crop": "Basmati Rice"})
    prompt = build_suggest_crops_prompt(data)
    assert "Specific Crop: Basmati Rice" in prompt.text
    assert "Focus your recommendations on this specific crop (Basmati Rice)" in prompt.text


def test_suggest_crops_prompt_omits_focus_without_crop(suggest_crops_input):
    prompt = build_suggest_crops_prompt(SuggestCropsInput.model_validate(suggest_crops_input))
    assert "Specific Crop" not in prompt.text
    assert "Focus your recommendations" not in prompt.text
    assert "Basmati Rice" not in prompt.text


def test_suggest_crops_prompt_attaches_farmland_photo(suggest_crops_input):
    data = SuggestCropsInput.model_validate(
        {**suggest_crops_input, "photoDataUri": PNG_DATA_URI}
    )
    prompt = build_suggest_crops_prompt(data)
    assert "Farmland Image" in prompt.text
    assert prompt.media == [PNG_DATA_URI]
    # The image travels as a media part, never inline in the text.
    assert "base64" not in prompt.text


def test_suggest_crops_prompt_omits_photo_section_without_photo(suggest_crops_input):
    prompt = build_suggest_crops_prompt(SuggestCropsInput.model_validate(suggest_crops_input))
    assert "Farmland Image" not in prompt.text


def test_suggest_crops_prompt_requests_language(suggest_crops_input):
    data = SuggestCropsInput.model_validate({**suggest_crops_input, "language": "hi"})
    prompt = build_suggest_crops_prompt(data)
    assert "requested language: hi" in prompt.text


def test_rendering_is_deterministic(suggest_crops_input):
    data = SuggestCropsInput.model_validate(suggest_crops_input)
    assert build_suggest_crops_prompt(data) == build_suggest_crops_prompt(data)


def test_user_text_with_braces_is_kept_verbatim():
    data = GetMainCropForRegionInput(region="Region {north}")
    assert "Region: Region {north}" in build_main_crop_prompt(data).text


def test_location_prompt_language_is_optional():
    without = build_suggest_crops_based_on_location_prompt(
        SuggestCropsBasedOnLocationInput(location="Nashik")
    )
    with_language = build_suggest_crops_based_on_location_prompt(
        SuggestCropsBasedOnLocationInput(location="Nashik", language="mr")
    )
    assert "based on the location: Nashik" in without.text
    assert "requested language" not in without.text
    assert "requested language: mr" in with_language.text


def test_fertilizer_prompt():
    prompt = build_suggest_fertilizers_prompt(
        SuggestFertilizersInput(crop="Wheat", soil_type="Loamy", soil_ph=7)
    )
    assert "Crop: Wheat" in prompt.text
    assert "Soil Type: Loamy" in prompt.text
    assert "Soil pH: 7" in prompt.text


def test_irrigation_prompt():
    prompt = build_irrigation_prompt(
        AdviseOnIrrigationPracticesInput(crop="Cotton", location="Vidarbha")
    )
    assert "Crop: Cotton" in prompt.text
    assert "Location: Vidarbha" in prompt.text


def test_pest_management_prompt():
    prompt = build_pest_management_prompt(
        SuggestPestManagementStrategiesInput(crop="Maize", region="Karnataka", language="kn")
    )
    assert "Crop: Maize" in prompt.text
    assert "Region: Karnataka" in prompt.text
    assert "requested language: kn" in prompt.text


def test_plant_health_prompt_attaches_photo():
    prompt = build_plant_health_prompt(DiagnosePlantHealthInput(photo_data_uri=PNG_DATA_URI))
    assert prompt.media == [PNG_DATA_URI]
    assert "isPlant" in prompt.text
    assert "requested language" not in prompt.text
