import logging
from typing import List, Optional

from motor.motor_asyncio import AsyncIOMotorCollection
from pydantic import ValidationError
from pymongo.errors import PyMongoError

from agriadvise.core.errors import ExternalCallError
from agriadvise.core.mongodb import get_crop_collection
from agriadvise.models.crop import CropRecord

logger = logging.getLogger(__name__)


def normalize_crop_id(name: str) -> str:
    return name.strip().lower()


async def get_crops(
    collection: Optional[AsyncIOMotorCollection] = None,
) -> List[CropRecord]:
    collection = collection if collection is not None else get_crop_collection()
    try:
        items = collection.find({}, sort=[("_id", 1)])
        crops = [CropRecord.model_validate(item) async for item in items]
    except (PyMongoError, ValidationError) as e:
        logger.exception("Fetching crops failed")
        raise ExternalCallError("Error fetching crops", operation="get_crops") from e
    logger.debug("Fetched %d crops", len(crops))
    return crops


async def get_crop_by_name(
    name: str,
    collection: Optional[AsyncIOMotorCollection] = None,
) -> Optional[CropRecord]:
    """Looks a crop up by its id; ``"Rice"`` and ``" rice "`` both resolve to ``rice``."""
    crop_id = normalize_crop_id(name)
    if not crop_id:
        return None

    collection = collection if collection is not None else get_crop_collection()
    try:
        item = await collection.find_one({"_id": crop_id})
        if not item:
            return None
        return CropRecord.model_validate(item)
    except (PyMongoError, ValidationError) as e:
        logger.exception("Fetching crop '%s' failed", crop_id)
        raise ExternalCallError(
            f"Error fetching crop {crop_id}", operation="get_crop_by_name"
        ) from e


async def get_crops_by_ph(
    ph: float,
    collection: Optional[AsyncIOMotorCollection] = None,
) -> List[CropRecord]:
    """Returns every crop whose ``[ph_min, ph_max]`` interval contains ``ph``."""
    collection = collection if collection is not None else get_crop_collection()
    query = {"ph_min": {"$lte": ph}, "ph_max": {"$gte": ph}}
    try:
        items = collection.find(query, sort=[("_id", 1)])
        return [CropRecord.model_validate(item) async for item in items]
    except (PyMongoError, ValidationError) as e:
        logger.exception("Fetching crops for pH %s failed", ph)
        raise ExternalCallError(
            f"Error fetching crops for pH {ph}", operation="get_crops_by_ph"
        ) from e
