from pydantic import Field

from .fields import (
    AdviceModel,
    FiniteFloat,
    LanguageCode,
    NonEmptyStr,
    NonNegativeFloat,
    OptionalLanguageCode,
    OptionalPhotoDataUri,
    OptionalStr,
    PhotoDataUri,
    Season,
    SoilPh,
    StepList,
)


class SuggestCropsInput(AdviceModel):
    soil_type: NonEmptyStr = Field(description="The type of soil.")
    soil_ph: SoilPh = Field(description="The pH of the soil.")
    temperature: FiniteFloat = Field(description="Average temperature in °C.")
    rainfall: NonNegativeFloat = Field(description="Average rainfall in mm.")
    season: Season = Field(description="The current growing season.")
    region: NonEmptyStr = Field(
        description="The region where the crops will be grown."
    )
    language: LanguageCode = Field(
        description='The language for the response (e.g., "en", "hi", "mr").'
    )
    crop: OptionalStr = Field(
        default=None, description="An optional specific crop to get advice for."
    )
    photo_data_uri: OptionalPhotoDataUri = Field(
        default=None,
        description=(
            "An optional photo of the farmland, as a data URI that must include a"
            " MIME type and use Base64 encoding."
        ),
    )


class CropAdvice(AdviceModel):
    """Four-part advice shared by the crop suggestion operations."""

    recommended_crops: str = Field(
        description="A list of recommended crops for the given conditions."
    )
    fertilizers: str = Field(description="Fertilizer suggestions for the crops.")
    irrigation: str = Field(description="Irrigation advice for the crops.")
    pest_management: str = Field(
        description="Pest management tips for the crops."
    )


class SuggestCropsOutput(CropAdvice):
    pass


class SuggestCropsBasedOnLocationInput(AdviceModel):
    location: NonEmptyStr = Field(description="The location for which to suggest crops.")
    language: OptionalLanguageCode = Field(
        default=None, description="Optional language for the response."
    )


class SuggestCropsBasedOnLocationOutput(CropAdvice):
    pass


class SuggestFertilizersInput(AdviceModel):
    crop: NonEmptyStr = Field(description="The recommended crop.")
    soil_type: NonEmptyStr = Field(description="The type of soil.")
    soil_ph: SoilPh = Field(description="The pH of the soil.")
    language: OptionalLanguageCode = Field(
        default=None, description="Optional language for the response."
    )


class SuggestFertilizersOutput(AdviceModel):
    fertilizer_suggestions: str = Field(
        description="Suggestions for fertilizers to use for the crop and soil conditions."
    )


class AdviseOnIrrigationPracticesInput(AdviceModel):
    crop: NonEmptyStr = Field(
        description="The crop for which to provide irrigation advice."
    )
    location: NonEmptyStr = Field(
        description="The location where the crop is being grown."
    )
    language: OptionalLanguageCode = Field(
        default=None, description="Optional language for the response."
    )


class AdviseOnIrrigationPracticesOutput(AdviceModel):
    irrigation_advice: str = Field(description="Advice on irrigation practices.")


class SuggestPestManagementStrategiesInput(AdviceModel):
    crop: NonEmptyStr = Field(description="The name of the crop.")
    region: NonEmptyStr = Field(description="The region where the crop is grown.")
    language: OptionalLanguageCode = Field(
        default=None, description="Optional language for the response."
    )


class SuggestPestManagementStrategiesOutput(AdviceModel):
    pest_management_strategies: str = Field(
        description="Basic pest management strategies for the crop."
    )


class GetMainCropForRegionInput(AdviceModel):
    region: NonEmptyStr = Field(description="The region in India.")


class GetMainCropForRegionOutput(AdviceModel):
    crop_name: str = Field(description="The main crop grown in the region.")


class DiagnosePlantHealthInput(AdviceModel):
    photo_data_uri: PhotoDataUri = Field(
        description=(
            "A photo of a plant, as a data URI that must include a MIME type and"
            " use Base64 encoding."
        )
    )
    language: OptionalLanguageCode = Field(
        default=None, description="Optional language for the response."
    )


class ActionPlan(AdviceModel):
    title: str = Field(description="A short, actionable title.")
    steps: StepList = Field(description="Ordered steps to follow.")


class DiagnosePlantHealthOutput(AdviceModel):
    is_plant: bool = Field(description="Whether the image contains a plant.")
    plant_name: str = Field(description="The common name of the identified plant.")
    is_healthy: bool = Field(description="Whether the plant appears to be healthy.")
    disease: str = Field(
        description="The identified disease or pest, or a statement that the plant is healthy."
    )
    remedy: ActionPlan = Field(
        description="A step-by-step treatment plan for the identified issue."
    )
    care_tips: ActionPlan = Field(
        description="General care tips for this type of plant to prevent future issues."
    )
