import logging
from typing import Any, Callable, Dict, Generic, Mapping, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from agriadvise.core.errors import InputValidationError, OutputValidationError
from agriadvise.core.generative_model import GenerativeModel
from agriadvise.models.advice import (
    AdviseOnIrrigationPracticesInput,
    AdviseOnIrrigationPracticesOutput,
    DiagnosePlantHealthInput,
    DiagnosePlantHealthOutput,
    GetMainCropForRegionInput,
    GetMainCropForRegionOutput,
    SuggestCropsBasedOnLocationInput,
    SuggestCropsBasedOnLocationOutput,
    SuggestCropsInput,
    SuggestCropsOutput,
    SuggestFertilizersInput,
    SuggestFertilizersOutput,
    SuggestPestManagementStrategiesInput,
    SuggestPestManagementStrategiesOutput,
)
from agriadvise.prompts.fertilizer_prompt import build_suggest_fertilizers_prompt
from agriadvise.prompts.irrigation_prompt import build_irrigation_prompt
from agriadvise.prompts.main_crop_prompt import build_main_crop_prompt
from agriadvise.prompts.pest_management_prompt import build_pest_management_prompt
from agriadvise.prompts.plant_health_prompt import build_plant_health_prompt
from agriadvise.prompts.rendering import AdvicePrompt
from agriadvise.prompts.suggest_crops_based_on_location_prompt import (
    build_suggest_crops_based_on_location_prompt,
)
from agriadvise.prompts.suggest_crops_prompt import build_suggest_crops_prompt

logger = logging.getLogger(__name__)

InputT = TypeVar("InputT", bound=BaseModel)
OutputT = TypeVar("OutputT", bound=BaseModel)


class AdvisoryFlow(Generic[InputT, OutputT]):
    """One stateless advisory operation: validate, render, ask the model, validate.

    The model is called at most once per run. Failures of the call itself
    propagate as ``ExternalCallError``; an answer that does not fit
    ``output_model`` raises ``OutputValidationError``.
    """

    def __init__(
        self,
        name: str,
        input_model: Type[InputT],
        output_model: Type[OutputT],
        build_prompt: Callable[[InputT], AdvicePrompt],
    ) -> None:
        self.name = name
        self.input_model = input_model
        self.output_model = output_model
        self.build_prompt = build_prompt

    def validate_input(self, raw_input: Union[InputT, Mapping[str, Any]]) -> InputT:
        if isinstance(raw_input, self.input_model):
            return raw_input
        try:
            return self.input_model.model_validate(raw_input)
        except ValidationError as exc:
            error = InputValidationError.from_validation_error(exc, operation=self.name)
            logger.info("Rejected %s input: %s", self.name, error.message)
            raise error from exc

    def validate_output(self, raw_output: Any) -> OutputT:
        try:
            return self.output_model.model_validate(raw_output)
        except ValidationError as exc:
            logger.warning(
                "Model answer for %s does not match %s: %s",
                self.name,
                self.output_model.__name__,
                exc,
            )
            raise OutputValidationError(
                f"Model answer does not match {self.output_model.__name__}",
                operation=self.name,
            ) from exc

    def render(self, raw_input: Union[InputT, Mapping[str, Any]]) -> AdvicePrompt:
        return self.build_prompt(self.validate_input(raw_input))

    async def run(
        self,
        model: GenerativeModel,
        raw_input: Union[InputT, Mapping[str, Any]],
    ) -> OutputT:
        data = self.validate_input(raw_input)
        prompt = self.build_prompt(data)
        raw_output = await model.complete(prompt, self.output_model)
        output = self.validate_output(raw_output)
        logger.info("Completed %s", self.name)
        return output


suggest_crops_flow = AdvisoryFlow(
    "suggest_crops",
    SuggestCropsInput,
    SuggestCropsOutput,
    build_suggest_crops_prompt,
)
suggest_crops_based_on_location_flow = AdvisoryFlow(
    "suggest_crops_based_on_location",
    SuggestCropsBasedOnLocationInput,
    SuggestCropsBasedOnLocationOutput,
    build_suggest_crops_based_on_location_prompt,
)
suggest_fertilizers_flow = AdvisoryFlow(
    "suggest_fertilizers",
    SuggestFertilizersInput,
    SuggestFertilizersOutput,
    build_suggest_fertilizers_prompt,
)
advise_on_irrigation_practices_flow = AdvisoryFlow(
    "advise_on_irrigation_practices",
    AdviseOnIrrigationPracticesInput,
    AdviseOnIrrigationPracticesOutput,
    build_irrigation_prompt,
)
suggest_pest_management_strategies_flow = AdvisoryFlow(
    "suggest_pest_management_strategies",
    SuggestPestManagementStrategiesInput,
    SuggestPestManagementStrategiesOutput,
    build_pest_management_prompt,
)
get_main_crop_for_region_flow = AdvisoryFlow(
    "get_main_crop_for_region",
    GetMainCropForRegionInput,
    GetMainCropForRegionOutput,
    build_main_crop_prompt,
)
diagnose_plant_health_flow = AdvisoryFlow(
    "diagnose_plant_health",
    DiagnosePlantHealthInput,
    DiagnosePlantHealthOutput,
    build_plant_health_prompt,
)

FLOWS: Dict[str, AdvisoryFlow] = {
    flow.name: flow
    for flow in (
        suggest_crops_flow,
        suggest_crops_based_on_location_flow,
        suggest_fertilizers_flow,
        advise_on_irrigation_practices_flow,
        suggest_pest_management_strategies_flow,
        get_main_crop_for_region_flow,
        diagnose_plant_health_flow,
    )
}


async def suggest_crops(
    model: GenerativeModel, data: Union[SuggestCropsInput, Mapping[str, Any]]
) -> SuggestCropsOutput:
    return await suggest_crops_flow.run(model, data)


async def suggest_crops_based_on_location(
    model: GenerativeModel,
    data: Union[SuggestCropsBasedOnLocationInput, Mapping[str, Any]],
) -> SuggestCropsBasedOnLocationOutput:
    return await suggest_crops_based_on_location_flow.run(model, data)


async def suggest_fertilizers(
    model: GenerativeModel, data: Union[SuggestFertilizersInput, Mapping[str, Any]]
) -> SuggestFertilizersOutput:
    return await suggest_fertilizers_flow.run(model, data)


async def advise_on_irrigation_practices(
    model: GenerativeModel,
    data: Union[AdviseOnIrrigationPracticesInput, Mapping[str, Any]],
) -> AdviseOnIrrigationPracticesOutput:
    return await advise_on_irrigation_practices_flow.run(model, data)


async def suggest_pest_management_strategies(
    model: GenerativeModel,
    data: Union[SuggestPestManagementStrategiesInput, Mapping[str, Any]],
) -> SuggestPestManagementStrategiesOutput:
    return await suggest_pest_management_strategies_flow.run(model, data)


async def get_main_crop_for_region(
    model: GenerativeModel, data: Union[GetMainCropForRegionInput, Mapping[str, Any]]
) -> GetMainCropForRegionOutput:
    return await get_main_crop_for_region_flow.run(model, data)


async def diagnose_plant_health(
    model: GenerativeModel, data: Union[DiagnosePlantHealthInput, Mapping[str, Any]]
) -> DiagnosePlantHealthOutput:
    return await diagnose_plant_health_flow.run(model, data)
