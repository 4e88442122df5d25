"""Internal constants shared across the library."""

USER_AGENT = "carservice/1.0"

DEFAULT_PRICING_URL = "http://localhost:8082"
DEFAULT_MAPS_URL = "http://localhost:9191"
DEFAULT_REQUEST_TIMEOUT = 10.0

PRICE_ENDPOINT = "/services/price"
MAPS_ENDPOINT = "/maps"
