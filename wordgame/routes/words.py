from typing import List

from fastapi import APIRouter, Depends, Path
from fastapi.responses import ORJSONResponse

from ..errors import EmptyCategoryError, NotFoundError
from ..logger import get_logger
from ..models.data import WordKey, WordRecord
from ..models.response import (ReadinessResponse, WordChangeResponse,
                               WordStatisticsResponse, WordUpdateResponse)
from ..models.score import WordRequest
from ..storage import WordCatalog
from .deps import get_catalog

logger = get_logger(__name__)
router = APIRouter(prefix="/api/words", tags=["words"])


@router.get("/categories", response_model=List[str])
def get_categories(catalog: WordCatalog = Depends(get_catalog)):
    """All categories, alphabetically"""
    return catalog.list_categories()


@router.get("/random/{category}", response_model=WordRecord)
def get_random_word(category: str = Path(..., min_length=1), catalog: WordCatalog = Depends(get_catalog)):
    """
    Draw a random word for a new game.

    Returns 404 when the category does not exist or holds no words.
    """
    try:
        return catalog.random_from_category(category)
    except EmptyCategoryError:
        if category.strip().lower() not in catalog.list_categories():
            logger.warning(f"Random word requested for unknown category {category!r}")
            raise NotFoundError(f"The category {category!r} does not exist.") from None
        raise


@router.get("/health", response_model=ReadinessResponse)
def check_health(catalog: WordCatalog = Depends(get_catalog)):
    """Ready when the word file is readable and holds at least one category"""
    if catalog.is_available() and catalog.list_categories():
        return ReadinessResponse(status="ready", message="Word system is operational")
    return ORJSONResponse(
        status_code=503,
        content=ReadinessResponse(
            status="not ready",
            message="Word system is not ready - no words or file issue",
        ).model_dump(),
    )


@router.get("/statistics", response_model=WordStatisticsResponse)
def get_statistics(catalog: WordCatalog = Depends(get_catalog)):
    return catalog.statistics()


@router.get("", response_model=List[WordRecord])
def get_all_words(catalog: WordCatalog = Depends(get_catalog)):
    return catalog.all_words()


@router.get("/category/{category}", response_model=List[WordRecord])
def get_words_by_category(category: str = Path(..., min_length=1), catalog: WordCatalog = Depends(get_catalog)):
    return catalog.list_by_category(category)


@router.get("/{category}/{word}", response_model=WordRecord)
def get_word(category: str, word: str, catalog: WordCatalog = Depends(get_catalog)):
    return catalog.get(category, word)


@router.post("", response_model=WordChangeResponse, status_code=201)
def add_word(data: WordRequest, catalog: WordCatalog = Depends(get_catalog)):
    """
    Add a word to the catalog.

    - **category**: letters a-z only
    - **word**: letters a-z only, unique within its category
    - **hint**: any non-empty text
    """
    record = catalog.add(data.to_record())
    return WordChangeResponse(message="Word added successfully", category=record.category, word=record.word)


@router.put("/{category}/{word}", response_model=WordUpdateResponse)
def update_word(category: str, word: str, data: WordRequest, catalog: WordCatalog = Depends(get_catalog)):
    old_key = WordKey.of(category, word)
    record = catalog.update(old_key, data.to_record())
    return WordUpdateResponse(
        message="Word updated successfully",
        old_category=old_key.category,
        old_word=old_key.word,
        new_category=record.category,
        new_word=record.word,
    )


@router.delete("/{category}/{word}", response_model=WordChangeResponse)
def delete_word(category: str, word: str, catalog: WordCatalog = Depends(get_catalog)):
    removed = catalog.delete(WordKey.of(category, word))
    return WordChangeResponse(message="Word deleted successfully", category=removed.category, word=removed.word)
