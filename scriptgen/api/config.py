import logging
import os

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

load_dotenv()

API_PREFIX = os.getenv("API_PREFIX", "/api/v1")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

MAX_EVENTS = int(os.getenv("MAX_EVENTS", "10000"))
