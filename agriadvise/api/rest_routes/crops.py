from typing import List

from fastapi import APIRouter, Query, status
from fastapi.responses import JSONResponse

from agriadvise.collections import crops as crops_collection
from agriadvise.core.errors import ExternalCallError
from agriadvise.models.crop import CropRecord
from agriadvise.models.fields import PH_MAX, PH_MIN

router = APIRouter(prefix="/api/crops", tags=["Crops"])


@router.get("", response_model=List[CropRecord])
async def list_crops():
    """
    Returns every crop reference record.
    """
    try:
        return await crops_collection.get_crops()
    except ExternalCallError:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Error fetching crops"},
        )


@router.get("/by-ph", response_model=List[CropRecord])
async def list_crops_by_ph(
    ph: float = Query(..., ge=PH_MIN, le=PH_MAX, description="Soil pH"),
):
    """
    Returns the crops whose pH tolerance range contains the given value.
    """
    return await crops_collection.get_crops_by_ph(ph)


@router.get("/{crop_id}", response_model=CropRecord)
async def get_crop(crop_id: str):
    """
    Returns a single crop by id; the lookup ignores case.
    """
    crop = await crops_collection.get_crop_by_name(crop_id)
    if crop is None:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"message": f"Crop {crop_id} not found"},
        )
    return crop
