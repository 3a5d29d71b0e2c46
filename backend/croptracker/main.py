# backend/croptracker/main.py

# import the logger module first so handlers attach
from .core.logger import logger

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .core.config import settings
from .core.database import create_tables, dispose_engine
from .core.error_middleware import ExceptionLoggingMiddleware, register_exception_handlers
from .core.request_middleware import RequestLoggingMiddleware
from .api import crops, expenses, incomes, users

# ---------------------------------------------------
# Create FastAPI instance
# ---------------------------------------------------
app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.API_VERSION,
    description="Track crops, their expenses and incomes, and per-crop profit.",
)


# ---------------------------------------------------
# CORS
# ---------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["*"],
)


# ---------------------------------------------------
# Logging middlewares + error responses
# ---------------------------------------------------
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(ExceptionLoggingMiddleware)
register_exception_handlers(app)


# ---------------------------------------------------
# Include Routers
# ---------------------------------------------------
app.include_router(users.router)
app.include_router(crops.router)
app.include_router(expenses.router)
app.include_router(incomes.router)


@app.on_event("startup")
async def startup_event():
    await create_tables()
    logger.info("Crop ledger API started")


@app.on_event("shutdown")
async def shutdown_event():
    await dispose_engine()
    logger.info("Crop ledger API stopped")


@app.get("/health", tags=["Health"])
async def health_check():
    return {"status": "ok"}


def main():
    uvicorn.run("croptracker.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
