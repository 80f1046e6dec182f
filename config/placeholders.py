"""
Build-time configuration slots.

The Immich server patches these strings with the real values when a user
downloads the bootstrap. Both are exactly 128 characters long and the patch
keeps that length, padding the value with filler characters.

DO NOT MODIFY THE LENGTH OF THESE STRINGS.
"""

SERVER_URL = "__IMMICH_SERVER_URL_PLACEHOLDER_________________________________________________________________________________________________"
SETUP_TOKEN = "__IMMICH_SETUP_TOKEN_PLACEHOLDER________________________________________________________________________________________________"

# Prefix shared by every unpatched slot
PLACEHOLDER_PREFIX = "__IMMICH_"

# Filler characters the provisioning server may pad with
PADDING_CHARS = "\x00_ "

SLOT_LENGTH = 128
