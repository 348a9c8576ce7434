PRICE_FETCH_ERROR_MESSAGE = "Failed to fetch prices"


class PriceFetchError(Exception):
    """Upstream price listings could not be turned into a price mapping."""


class UpstreamRequestError(PriceFetchError):
    """Network failure, timeout or non-2xx status from the listings endpoint."""


class UpstreamPayloadError(PriceFetchError):
    """Listings response body did not have the expected shape."""
