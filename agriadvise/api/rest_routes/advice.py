from typing import Any, Dict

from fastapi import APIRouter, Body, Depends

from agriadvise.core.generative_model import GenerativeModel, get_generative_model
from agriadvise.models.advice import (
    AdviseOnIrrigationPracticesOutput,
    DiagnosePlantHealthOutput,
    GetMainCropForRegionOutput,
    SuggestCropsBasedOnLocationOutput,
    SuggestCropsOutput,
    SuggestFertilizersOutput,
    SuggestPestManagementStrategiesOutput,
)
from agriadvise.services import advisory_flows

router = APIRouter(prefix="/api/advice", tags=["Advice"])


@router.post("/suggest-crops", response_model=SuggestCropsOutput)
async def suggest_crops(
    payload: Dict[str, Any] = Body(...),
    model: GenerativeModel = Depends(get_generative_model),
):
    """
    Recommends crops, fertilizers, irrigation and pest management for the
    given soil and climate conditions.
    """
    return await advisory_flows.suggest_crops(model, payload)


@router.post(
    "/suggest-crops-based-on-location",
    response_model=SuggestCropsBasedOnLocationOutput,
)
async def suggest_crops_based_on_location(
    payload: Dict[str, Any] = Body(...),
    model: GenerativeModel = Depends(get_generative_model),
):
    return await advisory_flows.suggest_crops_based_on_location(model, payload)


@router.post("/suggest-fertilizers", response_model=SuggestFertilizersOutput)
async def suggest_fertilizers(
    payload: Dict[str, Any] = Body(...),
    model: GenerativeModel = Depends(get_generative_model),
):
    return await advisory_flows.suggest_fertilizers(model, payload)


@router.post(
    "/advise-on-irrigation-practices",
    response_model=AdviseOnIrrigationPracticesOutput,
)
async def advise_on_irrigation_practices(
    payload: Dict[str, Any] = Body(...),
    model: GenerativeModel = Depends(get_generative_model),
):
    return await advisory_flows.advise_on_irrigation_practices(model, payload)


@router.post(
    "/suggest-pest-management-strategies",
    response_model=SuggestPestManagementStrategiesOutput,
)
async def suggest_pest_management_strategies(
    payload: Dict[str, Any] = Body(...),
    model: GenerativeModel = Depends(get_generative_model),
):
    return await advisory_flows.suggest_pest_management_strategies(model, payload)


@router.post("/main-crop-for-region", response_model=GetMainCropForRegionOutput)
async def get_main_crop_for_region(
    payload: Dict[str, Any] = Body(...),
    model: GenerativeModel = Depends(get_generative_model),
):
    return await advisory_flows.get_main_crop_for_region(model, payload)


@router.post("/diagnose-plant-health", response_model=DiagnosePlantHealthOutput)
async def diagnose_plant_health(
    payload: Dict[str, Any] = Body(...),
    model: GenerativeModel = Depends(get_generative_model),
):
    """
    Identifies the plant in the photo, assesses its health and returns a
    remedy and care-tip plan.
    """
    return await advisory_flows.diagnose_plant_health(model, payload)
