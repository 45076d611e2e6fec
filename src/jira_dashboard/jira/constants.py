"""Constants specific to Jira operations."""

SEARCH_PATH = "rest/api/2/search"

# Timeout (seconds) for bearer and PAT-header search attempts
TOKEN_REQUEST_TIMEOUT = 30
# Timeout (seconds) for basic-auth attempts and other calls; atlassian-python-api's default
DEFAULT_REQUEST_TIMEOUT = 75

# PAT header conventions, tried in this order when no caller token is given
PAT_HEADER_FORMATS: tuple[tuple[str, str, str], ...] = (
    ("X-API-Token", "X-API-Token", "{token}"),
    ("X-Auth-Token", "X-Auth-Token", "{token}"),
    ("Authorization Token", "Authorization", "Token {token}"),
    ("Authorization PAT", "Authorization", "PAT {token}"),
)

JSON_HEADERS: dict[str, str] = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}

# Markers of an HTML login page returned instead of JSON
HTML_MARKERS: tuple[str, ...] = ("<!doctype", "<html")

STATUS_MESSAGES: dict[int, str] = {
    401: "Authentication failed. Please check your Jira token is valid and has not expired.",
    403: "Access forbidden. Please check your Jira permissions.",
    404: "Resource not found. Please check your Jira URL and query.",
    500: "Jira server error. Please try again later.",
    503: "Jira service unavailable. Please try again later.",
}
