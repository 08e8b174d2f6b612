import logging
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from agriadvise.api.rest_routes.advice import router as advice_router
from agriadvise.api.rest_routes.crops import router as crops_router
from agriadvise.core.config import settings
from agriadvise.core.errors import (
    AdvisoryError,
    ExternalCallError,
    InputValidationError,
    OutputValidationError,
)
from agriadvise.core.mongodb import close_mongo_client, init_mongo_client

load_dotenv()

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

ERROR_STATUS_CODES = {
    InputValidationError: 422,
    OutputValidationError: status.HTTP_502_BAD_GATEWAY,
    ExternalCallError: status.HTTP_503_SERVICE_UNAVAILABLE,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_mongo_client()
    yield
    await close_mongo_client()


app = FastAPI(title="AgriAdvise AI", lifespan=lifespan)

app.include_router(crops_router)
app.include_router(advice_router)


@app.exception_handler(AdvisoryError)
async def advisory_error_handler(request: Request, exc: AdvisoryError) -> JSONResponse:
    status_code = ERROR_STATUS_CODES.get(
        type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR
    )
    return JSONResponse(
        status_code=status_code,
        content={"message": "Operation failed, please retry.", **exc.to_dict()},
    )


@app.get("/")
async def root():
    return {"message": "Welcome to AgriAdvise AI, your guide to smarter farming!"}
