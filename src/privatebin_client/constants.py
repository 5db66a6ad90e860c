"""Default configuration constants for the PrivateBin client."""

# HTTP settings (milliseconds)
DEFAULT_TIMEOUT_MS = 30_000

# PrivateBin only answers with JSON when this header is present, with this casing
REQUESTED_WITH_HEADER = "X-Requested-With"
REQUESTED_WITH_VALUE = "JSONHttpRequest"

# Paste envelope format version
PASTE_FORMAT_VERSION = 2

# Statuses that carry a paste response body
SUCCESS_STATUS_CODES = (200, 201)

# Upload defaults
DEFAULT_EXPIRY = "1week"
DEFAULT_UPLOAD_FORMAT = "markdown"

# Encryption option values the v2 paste format accepts
CIPHER_ALGORITHM = "aes"
KEY_SIZES = (128, 196, 256)
TAG_SIZES = (96, 104, 112, 120, 128)

# Encryption defaults
DEFAULT_KEY_SIZE = 256
DEFAULT_TAG_SIZE = 128
DEFAULT_ITERATIONS = 100_000
