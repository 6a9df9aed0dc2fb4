"""State codec: Document <-> compact URL-safe token.

Encoding swaps embedded data URIs for ``ref:<hash>`` references held in the
content store, serializes to compact JSON, deflates with zlib, and emits
URL-safe base64 without padding (alphabet ``A-Z a-z 0-9 - _``).

Decoding is lossy-safe: any malformed token yields ``None`` and a reference
whose payload is gone decodes to an empty field.
"""

from __future__ import annotations

import base64
import binascii
import json
import logging
import zlib
from dataclasses import dataclass

from pydantic import ValidationError

from brandbento.models.document import CURRENT_VERSION, Document
from brandbento.state.content_store import ContentStore

logger = logging.getLogger(__name__)

REF_PREFIX = "ref:"
EMBEDDED_PREFIX = "data:"
PAYLOAD_FIELDS = ("logo", "hero_image")
DEFAULT_SOFT_LIMIT = 1800


@dataclass
class EncodeResult:
    token: str
    length: int
    over_budget: bool


def is_embedded(value: str | None) -> bool:
    return bool(value) and value.startswith(EMBEDDED_PREFIX)


def _compress(text: str) -> str:
    raw = zlib.compress(text.encode("utf-8"), 9)
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


def _decompress(token: str) -> str | None:
    # Query-string decoders sometimes hand back whitespace around the token
    token = token.strip()
    if not token:
        return None
    padded = token + "=" * (-len(token) % 4)
    try:
        raw = base64.b64decode(padded, altchars=b"-_", validate=True)
        return zlib.decompress(raw).decode("utf-8")
    except (binascii.Error, ValueError, zlib.error, UnicodeDecodeError) as e:
        logger.debug("Token is not valid compressed state: %s", e)
        return None


class StateCodec:
    """Converts documents to and from shareable tokens."""

    def __init__(
        self,
        content_store: ContentStore,
        soft_limit: int = DEFAULT_SOFT_LIMIT,
        max_version: int = CURRENT_VERSION,
    ) -> None:
        self.content_store = content_store
        self.soft_limit = soft_limit
        self.max_version = max_version

    def encode(self, document: Document) -> str:
        return self.encode_with_report(document).token

    def encode_with_report(self, document: Document) -> EncodeResult:
        """Encode ``document`` and report the token length against the soft budget."""
        copy = document.model_copy(deep=True)
        for name in PAYLOAD_FIELDS:
            value = getattr(copy.assets, name)
            if is_embedded(value):
                hash_ = self.content_store.put(value)
                setattr(copy.assets, name, f"{REF_PREFIX}{hash_}")

        text = json.dumps(copy.model_dump(mode="json"), separators=(",", ":"))
        token = _compress(text)

        over = len(token) > self.soft_limit
        if over:
            logger.warning(
                "URL state: %d chars (soft limit %d)", len(token), self.soft_limit
            )
        return EncodeResult(token=token, length=len(token), over_budget=over)

    def decode(self, token: str) -> Document | None:
        """Rebuild a document from ``token``, or ``None`` if there is no usable state.

        Documents saved with an older or missing ``version`` come back upgraded
        to ``max_version``, so ``decode(encode(d)) == d`` only holds for
        documents already at the current version.
        """
        text = _decompress(token)
        if text is None:
            return None

        try:
            data = json.loads(text)
        except (json.JSONDecodeError, RecursionError) as e:
            logger.warning("Shared state is not valid JSON: %s", e)
            return None
        if not isinstance(data, dict):
            logger.warning("Shared state has unexpected shape: %s", type(data).__name__)
            return None

        version = data.get("version", CURRENT_VERSION)
        if isinstance(version, int) and version > self.max_version:
            logger.warning(
                "Shared state version %s is newer than supported %d", version, self.max_version
            )
            return None

        try:
            document = Document.model_validate(data)
        except ValidationError as e:
            logger.warning("Shared state failed validation: %s", e.error_count())
            return None
        # Older schemas are upgraded by the model defaults
        if document.version < self.max_version or "version" not in data:
            document.version = self.max_version

        for name in PAYLOAD_FIELDS:
            value = getattr(document.assets, name)
            if value and value.startswith(REF_PREFIX):
                payload = self.content_store.get(value[len(REF_PREFIX):])
                if payload is None:
                    logger.info("Referenced %s payload %s is missing", name, value)
                setattr(document.assets, name, payload)

        return document
