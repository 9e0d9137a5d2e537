import logging
from moodpick.main import app

# Setup basic logging to capture errors in Vercel Logs
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

logger.info("MoodPick API initialized")

# This is the entry point for Vercel Serverless Functions
# It exports the FastAPI app instance
