"""
Fixed strings returned by the API.

`REST_*` identify the HTTP status class of an error response; the remaining
messages are the call-site specific details.
"""

SUCCESS = "Success"

# ---------------------------------------------------------------------------
# Rest error messages
# ---------------------------------------------------------------------------

REST_BAD_REQUEST = "400: Bad Request"
REST_UNAUTHORIZED = "401: Unauthorized"
REST_FORBIDDEN = "403: Forbidden"
REST_NOT_FOUND = "404: Not Found"
REST_CONFLICT = "409: Conflict"
REST_MEDIA_TYPE_NOT_SUPPORTED = "415: Media Type Not Supported"
REST_INTERNAL_SERVER_ERROR = "500: Internal Server Error"
REST_SERVICE_UNAVAILABLE = "503: Service Unavailable"

# ---------------------------------------------------------------------------
# Detailed error messages
# ---------------------------------------------------------------------------

UNAUTHORIZED_REQUEST = "Unauthorized request."
INVALID_JSON = "Invalid JSON sent in request."
NOT_PERMITTED_TO_SEE_THIS = "You're not permitted to see the requested resource."
PROJECT_NOT_FOUND = "The project was not found."
PROJECT_ALREADY_EXISTS = "The project already exists."
DONT_DIVIDE_BY_ZERO = "Don't divide by zero."
FILE_DOES_NOT_EXIST = "File does not exist."

# Each ends with a trailing space so they can be concatenated.
PROJECT_MUST_HAVE_NAME = "The project must have a name. "
PROJECT_MUST_HAVE_DESCRIPTION = "The project must have a description. "
PROJECT_MUST_HAVE_START_DATE = "The project must have a start date. "
