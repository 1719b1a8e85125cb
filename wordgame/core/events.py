from fastapi import FastAPI
from ..config import storage
from ..logger import get_logger

logger = get_logger(__name__)

async def startup_event(app: FastAPI):
    """Prepare the word and score files"""
    try:
        app.state.storage.initialize(seed_words=storage.seed_words)
        logger.info("Storage initialized")
    except Exception as e:
        logger.error(f"Failed to initialize storage: {e}")
        raise

async def shutdown_event(app: FastAPI):
    try:
        app.state.storage.close()
    except Exception as e:
        logger.error(f"Error during shutdown: {e}")
