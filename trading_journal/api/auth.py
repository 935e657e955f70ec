from typing import Optional

from fastapi import Security
from fastapi.security import APIKeyHeader

WEBHOOK_TOKEN_HEADER = APIKeyHeader(name="X-Webhook-Token", auto_error=False)


async def webhook_header_token(token: Optional[str] = Security(WEBHOOK_TOKEN_HEADER)) -> Optional[str]:
    """Header fallback for senders that cannot put ``auth_token`` in the body. Checked by WebhookIngestor."""
    return token
