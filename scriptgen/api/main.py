import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from scriptgen.api.config import API_PREFIX, LOG_LEVEL
from scriptgen.api.routers import scripts

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Puppeteer Script Generator",
    description="Generates Puppeteer scripts from recorded browser events",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(scripts.router, prefix=API_PREFIX)


@app.get("/")
async def root():
    return {"message": "Welcome to the Puppeteer Script Generator API. Go to /docs for documentation."}
