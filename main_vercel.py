import logging
import os
import sys

# Ensure repo root is on sys.path
_ROOT = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, _ROOT)

# Level only, no timestamps: the platform stamps each log line itself.
logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(levelname)s %(message)s",
)

# Import the actual FastAPI app from the main backend module
from backend.main import app
