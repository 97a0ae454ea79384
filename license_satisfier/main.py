import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from license_satisfier.api.satisfaction import router as satisfaction_router
from license_satisfier.utility.config import LOG_LEVEL

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="License Expression Satisfaction Checker",
    version="1.0.0",
)

# Main API
app.include_router(satisfaction_router, prefix="/api", tags=["Satisfaction"])

# CORS Configuration
origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# quick liveness check
@app.get("/")
def root():
    return {"message": "License Satisfier Backend is running"}
