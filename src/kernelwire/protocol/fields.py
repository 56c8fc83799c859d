"""Protocol constants.

Keep these in one place to avoid stringly-typed message handling.
"""

# Separates the routing identities from the signed region of a message.
DELIMITER = b"<IDS|MSG>"

# Frames following the delimiter, in wire order.
SIGNATURE = "signature"
HEADER = "header"
PARENT_HEADER = "parent_header"
METADATA = "metadata"
CONTENT = "content"

SIGNED_FIELDS = (HEADER, PARENT_HEADER, METADATA, CONTENT)
FRAME_COUNT = 1 + len(SIGNED_FIELDS)

# Header keys, in the order they are serialized.
MSG_ID = "msg_id"
USERNAME = "username"
SESSION = "session"
MSG_TYPE = "msg_type"

HEADER_KEYS = (MSG_ID, USERNAME, SESSION, MSG_TYPE)

DEFAULT_SIGNATURE_SCHEME = "hmac-sha256"
