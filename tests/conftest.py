from typing import Any, Dict, List, Optional, Type

import pytest
from pydantic import BaseModel
from pymongo.errors import PyMongoError

from agriadvise.prompts.rendering import AdvicePrompt

# 1x1 transparent PNG
PNG_DATA_URI = (
    "data:image/png;base64,"
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mNkYAAAAAYAAjCB0C8AAAAASUVORK5CYII="
)

SEED_CROPS = [
    {
        "_id": "rice",
        "category": "Cereal",
        "scientific_name": "Oryza sativa",
        "soil_type": "Clay loam",
        "ph_min": 5.5,
        "ph_max": 7.5,
        "temp_min": 20,
        "temp_max": 35,
        "rainfall_min": 800,
        "rainfall_max": 2000,
        "season": "Kharif",
        "fertilizers": "NPK 10:26:26 before sowing",
        "irrigation": "Maintain 3-5 cm water depth",
        "pests": ["stem borer", "leaf folder"],
    },
    {
        "_id": "wheat",
        "category": "Cereal",
        "scientific_name": "Triticum aestivum",
        "soil_type": "Loamy",
        "ph_min": 6.0,
        "ph_max": 7.5,
        "temp_min": 10,
        "temp_max": 25,
        "rainfall_min": 300,
        "rainfall_max": 900,
        "season": "Rabi",
        "fertilizers": "Urea top-dressing at 30 & 60 DAS",
        "irrigation": "Critical stages: crown root initiation, heading",
        "pests": ["rust", "aphids"],
    },
    {
        "_id": "chickpea",
        "category": "Pulse",
        "scientific_name": "Cicer arietinum",
        "soil_type": "Light to heavy black soils",
        "ph_min": 6.0,
        "ph_max": 8.0,
        "temp_min": 10,
        "temp_max": 25,
        "rainfall_min": 300,
        "rainfall_max": 500,
        "season": "Rabi",
        "fertilizers": "Starter dose of nitrogen and phosphorus.",
        "irrigation": "One irrigation at pre-flowering stage if needed.",
        "pests": ["pod borer", "wilt"],
    },
]


class StubGenerativeModel:
    """Returns a canned answer (or raises) and records every prompt it receives."""

    def __init__(self, response: Any = None, error: Optional[Exception] = None):
        self.response = response
        self.error = error
        self.calls: List[tuple[AdvicePrompt, Type[BaseModel]]] = []

    async def complete(
        self, prompt: AdvicePrompt, output_schema: Type[BaseModel]
    ) -> Dict[str, Any]:
        self.calls.append((prompt, output_schema))
        if self.error is not None:
            raise self.error
        return self.response


def _matches(document: Dict[str, Any], query: Dict[str, Any]) -> bool:
    for field, condition in query.items():
        value = document.get(field)
        if isinstance(condition, dict):
            if "$lte" in condition and not value <= condition["$lte"]:
                return False
            if "$gte" in condition and not value >= condition["$gte"]:
                return False
        elif value != condition:
            return False
    return True


class FakeCursor:
    def __init__(self, documents: List[Dict[str, Any]]):
        self._documents = iter(documents)

    def __aiter__(self):
        return self

    async def __anext__(self) -> Dict[str, Any]:
        try:
            return next(self._documents)
        except StopIteration:
            raise StopAsyncIteration


class FakeCropCollection:
    """In-memory stand-in for the motor collection holding crop records."""

    def __init__(self, documents: List[Dict[str, Any]], fail: bool = False):
        self.documents = [dict(doc) for doc in documents]
        self.fail = fail
        self.queries: List[Dict[str, Any]] = []

    def find(self, query: Dict[str, Any], sort=None) -> FakeCursor:
        self.queries.append(query)
        if self.fail:
            raise PyMongoError("connection refused")
        found = [doc for doc in self.documents if _matches(doc, query)]
        if sort:
            key, direction = sort[0]
            found.sort(key=lambda doc: doc[key], reverse=direction < 0)
        return FakeCursor(found)

    async def find_one(self, query: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        self.queries.append(query)
        if self.fail:
            raise PyMongoError("connection refused")
        for doc in self.documents:
            if _matches(doc, query):
                return doc
        return None


@pytest.fixture
def crop_collection() -> FakeCropCollection:
    return FakeCropCollection(SEED_CROPS)


@pytest.fixture
def failing_crop_collection() -> FakeCropCollection:
    return FakeCropCollection(SEED_CROPS, fail=True)


@pytest.fixture
def broken_crop_collection() -> FakeCropCollection:
    rice = {key: value for key, value in SEED_CROPS[0].items() if key != "fertilizers"}
    return FakeCropCollection([rice, *SEED_CROPS[1:]])


@pytest.fixture
def suggest_crops_input() -> Dict[str, Any]:
    return {
        "soilType": "Alluvial",
        "soilPh": 6.5,
        "temperature": 28,
        "rainfall": 700,
        "season": "Rainy",
        "region": "Punjab",
        "language": "en",
    }


@pytest.fixture
def suggest_crops_output() -> Dict[str, Any]:
    return {
        "recommendedCrops": "Rice, Maize",
        "fertilizers": "NPK 10:26:26",
        "irrigation": "Flood irrigation",
        "pestManagement": "Monitor for stem borer",
    }
