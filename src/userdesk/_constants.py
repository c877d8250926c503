"""Internal constants shared across the library."""

USERS_URL = "https://jsonplaceholder.typicode.com/users"
USER_AGENT = "userdesk/1.0 (+aiohttp)"
DEFAULT_REQUEST_TIMEOUT = 10.0
