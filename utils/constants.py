"""
utils/constants.py

Purpose: Centralized static content

- User-facing slash command replies
- Slack event type tags
- Error messages for rejected payloads

(Prevents hardcoding across the codebase)
"""

# ============================================================
# SLASH COMMAND REPLIES
# ============================================================

AUTO_RESPONSE_ENABLED_MESSAGE = "You have enabled auto response."

AUTO_RESPONSE_FAILED_MESSAGE = "Sorry, im not able to do this for you."

# ============================================================
# EVENTS API
# ============================================================

EVENT_TYPE_URL_VERIFICATION = "url_verification"
EVENT_TYPE_EVENT_CALLBACK = "event_callback"
INNER_EVENT_TYPE_MESSAGE = "message"

# ============================================================
# REJECTION MESSAGES
# ============================================================

INVALID_TOKEN_MESSAGE = "Invalid request token"
INVALID_TYPE_MESSAGE = "Invalid request event type"
INVALID_EVENT_MESSAGE = "Invalid event received"

# ============================================================
# SLACK WEB API
# ============================================================

SLACK_POST_MESSAGE_METHOD = "chat.postMessage"
