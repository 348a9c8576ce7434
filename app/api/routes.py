from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from app.errors import PRICE_FETCH_ERROR_MESSAGE, PriceFetchError
from app.services import catalog
from app.services.price_service import dump_prices

router = APIRouter()


@router.get('/cryptocurrencies')
def list_cryptocurrencies():
    return catalog.dump_catalog()


@router.get('/prices')
def get_prices(request: Request):
    service = request.app.state.price_service
    try:
        prices = service.fetch_prices()
    except PriceFetchError:
        return JSONResponse(status_code=500, content={'error': PRICE_FETCH_ERROR_MESSAGE})
    return dump_prices(prices)
