from fastapi import Request

from ..storage import ScoreLedger, StorageManager, WordCatalog


def get_storage(request: Request) -> StorageManager:
    return request.app.state.storage


def get_catalog(request: Request) -> WordCatalog:
    return get_storage(request).catalog


def get_ledger(request: Request) -> ScoreLedger:
    return get_storage(request).ledger
