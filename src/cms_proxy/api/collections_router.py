from typing import Dict

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from cms_proxy.error_handler import ErrorHandler
from cms_proxy.integrations.collection_service import CollectionService

api = APIRouter()
collections_api = api

error_handler = ErrorHandler()


def get_collection_service(request: Request) -> CollectionService:
    return request.app.state.collection_service


def _success_headers(service: CollectionService) -> Dict[str, str]:
    return {
        "Access-Control-Allow-Origin": "*",
        "Access-Control-Allow-Methods": "GET",
        "Access-Control-Allow-Headers": "Content-Type",
        "Cache-Control": f"max-age={service.config.http.cache_control_max_age}",
    }


async def _collection_response(resource: str, service: CollectionService) -> JSONResponse:
    try:
        items = await service.get_collection(resource)
    except Exception as exc:
        return JSONResponse(status_code=500, content=error_handler.handle_exception(exc, resource))

    return JSONResponse(status_code=200, content={"items": items}, headers=_success_headers(service))


@api.get("/monuments.json", tags=["Collections"])
async def get_monuments(service: CollectionService = Depends(get_collection_service)):
    """All monument records, normalized."""
    return await _collection_response("monuments", service)


@api.get("/ecosystem.json", tags=["Collections"])
async def get_ecosystem(service: CollectionService = Depends(get_collection_service)):
    """All ecosystem records, normalized."""
    return await _collection_response("ecosystem", service)
