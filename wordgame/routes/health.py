import time
from fastapi import APIRouter
from ..models.response import HealthResponse
from ..logger import get_logger

logger = get_logger(__name__)
router = APIRouter()

# Track application start time
start_time = time.time()

@router.get("/")
def home():
    """Service banner with the main endpoints"""
    return {
        "service": "Word Game API Server",
        "status": "running",
        "available_endpoints": {
            "words": "/api/words",
            "scores": "/api/scores",
            "health_words": "/api/words/health",
            "health_scores": "/api/scores/health",
        },
    }

@router.get("/health", response_model=HealthResponse)
@router.head("/health")
def health_check():
    """Process liveness; store readiness lives under /api/words and /api/scores"""
    response = HealthResponse(uptime=time.time() - start_time)
    logger.debug(f"Health check response: {response.model_dump()}")
    return response
