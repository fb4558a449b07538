from typing import Optional
from fastapi import FastAPI, HTTPException, Query
from .clients.omdb_client import search_omdb
from .config import settings
from .errors import SearchError
from .logging_config import configure_logging
from .schemas.omdb_schemas import ErrorResponse, SearchResponse

configure_logging(settings)

app = FastAPI()

ERROR_RESPONSES = {
    code: {'model': ErrorResponse} for code in (400, 404, 422, 503, 504)
}


async def _search(
    filter: str,
    type: Optional[str],
    year: Optional[str],
    page: Optional[str]
) -> SearchResponse:
    try:
        return await search_omdb(filter, type, year, page)
    except SearchError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@app.get('/search', response_model=SearchResponse, responses=ERROR_RESPONSES)
async def search(
    filter: str = Query(''),
    type: str = Query(''),
    year: str = Query(''),
    page: str = Query('')
):
    return await _search(filter, type, year, page)


@app.get('/search/{type}', response_model=SearchResponse, responses=ERROR_RESPONSES)
async def search_type(
    type: str,
    filter: str = Query(''),
    year: str = Query(''),
    page: str = Query('')
):
    return await _search(filter, type, year, page)


@app.get('/search/{type}/{year}', response_model=SearchResponse, responses=ERROR_RESPONSES)
async def search_type_with_year(
    type: str,
    year: str,
    filter: str = Query(''),
    page: str = Query('')
):
    return await _search(filter, type, year, page)
