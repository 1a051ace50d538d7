"""Request signer — signature generation, envelopes and verification."""

from __future__ import annotations

import hmac
from collections.abc import Callable
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from signatory.envelope import TIMESTAMP_FIELD, decode_envelope, encode_envelope
from signatory.errors import SerializationError, SignatoryError
from signatory.logging import configure_logging, get_logger
from signatory.signing.canonical import SIGN_FIELD, canonicalise
from signatory.signing.digest import is_signature, sign_canonical

if TYPE_CHECKING:
    from signatory.settings import Settings
    from signatory.values import ParameterSet

__all__ = ["Signatory"]

logger = get_logger(component="signatory")


def _utcnow() -> datetime:
    return datetime.now(UTC)


class Signatory:
    """Signs, packs and verifies request parameters with a shared secret.

    The secret is captured once and never exposed; instances hold no other
    state and may be shared across threads.
    """

    __slots__ = ("_clock", "_secret")

    def __init__(self, secret: str, *, clock: Callable[[], datetime] = _utcnow) -> None:
        self._secret = secret
        self._clock = clock

    @classmethod
    def from_settings(cls, settings: Settings) -> Signatory:
        """Configure logging and build a signer. Refuses an empty secret (fail-closed)."""
        if not settings.secret:
            raise ValueError("SIGNATORY_SECRET not set")
        configure_logging(json_output=settings.log_json, level=settings.log_level)
        return cls(settings.secret)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(secret=***)"

    def gen_signature(self, params: ParameterSet) -> str:
        """Return the 32-char uppercase hex signature of params.

        Raises:
            EmptyInputError: If ``params`` has no entries.
            SerializationError: If a signed value is not encodable as UTF-8.
        """
        canonical = canonicalise(params)
        try:
            return sign_canonical(canonical, self._secret)
        except UnicodeEncodeError as exc:
            raise SerializationError(f"Params are not valid UTF-8 text: {exc.reason}") from exc

    def encode(self, params: ParameterSet) -> str:
        """Pack params into a base64 envelope, adding timestamp and sign if absent."""
        envelope = encode_envelope(params, signer=self.gen_signature, clock=self._clock)
        logger.debug(
            "envelope_encoded",
            fields=len(params),
            had_timestamp=TIMESTAMP_FIELD in params,
            had_sign=SIGN_FIELD in params,
            size=len(envelope),
        )
        return envelope

    def decode(self, envelope: str) -> dict[str, Any]:
        """Unpack an envelope. Structural only; call verify() separately."""
        return decode_envelope(envelope)

    def verify(self, params: ParameterSet, signature: Any) -> bool:
        """Check a claimed signature against params. Never raises."""
        if not is_signature(signature):
            logger.debug("signature_malformed")
            return False
        try:
            expected = self.gen_signature(params)
        except (SignatoryError, TypeError, ValueError) as exc:
            logger.debug("signature_recompute_failed", error=type(exc).__name__)
            return False
        matched = hmac.compare_digest(expected, signature)
        if not matched:
            logger.debug("signature_mismatch")
        return matched

    def verify_envelope(self, envelope: str) -> bool:
        """Decode an envelope and verify the sign it carries."""
        try:
            params = self.decode(envelope)
        except SignatoryError as exc:
            logger.debug("envelope_rejected", error=type(exc).__name__)
            return False
        return self.verify(params, params.get(SIGN_FIELD))
