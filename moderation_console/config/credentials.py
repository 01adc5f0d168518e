from __future__ import annotations

from moderation_console.schemas import Credential

# Rotation pool for shared reviewer accounts on the staging admin API. These are
# plain fixtures, not secrets; override with CONSOLE_CREDENTIALS per deployment.
DEFAULT_CREDENTIAL_POOL: tuple[Credential, ...] = (
    Credential(username="reviewer01", password="review-stg-01", code_2fa="222"),
    Credential(username="reviewer02", password="review-stg-02", code_2fa="222"),
    Credential(username="reviewer03", password="review-stg-03", code_2fa="222"),
    Credential(username="reviewer04", password="review-stg-04", code_2fa="222"),
    Credential(username="reviewer05", password="review-stg-05", code_2fa="222"),
    Credential(username="reviewer06", password="review-stg-06", code_2fa="222"),
)
