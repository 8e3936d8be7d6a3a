"""
Payment link codec.

Encodes a PaymentRequest into a native-scheme deep link
(monadpay://send?...) or a web fallback link (<base>/send?...), and decodes
either form back. Decoding never raises: any failure yields None, with the
reason available from decode_verbose().
"""

from urllib.parse import parse_qs, urlencode, urlsplit

from loguru import logger
from pydantic import ValidationError as PydanticValidationError

from monadpay.config.constants import DEFAULT_CHAIN_ID, PAYMENT_LINK_PARAMS, SEND_ACTION
from monadpay.config.settings import settings
from monadpay.models import DeepLinkSchema, PaymentRequest
from monadpay.utils.exceptions import DecodeError
from monadpay.validators import is_valid_address


# Generic network scheme substituted for the custom scheme before parsing
_PARSEABLE_SCHEME = "http"


class PaymentLinkCodec:
    """
    Encoder/decoder for MonadPay payment links.

    Attributes:
        scheme: Custom deep link scheme (e.g. "monadpay")
        web_base_url: Base URL of the web fallback
        default_chain_id: Chain id assumed when a link omits chainId
    """

    def __init__(
        self,
        scheme: str,
        web_base_url: str,
        default_chain_id: int = DEFAULT_CHAIN_ID,
    ) -> None:
        self.scheme = scheme
        self.web_base_url = web_base_url.rstrip("/")
        self.default_chain_id = default_chain_id
        self._prefix = f"{scheme}://"

    @classmethod
    def from_settings(cls) -> "PaymentLinkCodec":
        return cls(
            scheme=settings.deep_link_scheme,
            web_base_url=settings.web_base_url,
            default_chain_id=settings.chain_id,
        )

    # ------------------------------------------------------------------
    # Encoding
    # ------------------------------------------------------------------

    def encode(self, request: PaymentRequest) -> str:
        """
        Encode payment request into a deep link.

        Args:
            request: Payment request

        Returns:
            Deep link like "monadpay://send?to=0x...&amount=1.5"
        """
        return f"{self._prefix}{SEND_ACTION}?{self._query(request)}"

    def encode_web(self, request: PaymentRequest, base_url: str | None = None) -> str:
        """
        Encode payment request into a web fallback link.

        Args:
            request: Payment request
            base_url: Web app base URL (defaults to the configured one)

        Returns:
            Web URL like "https://pay.example/send?to=0x...&amount=1.5"
        """
        base = (base_url or self.web_base_url).rstrip("/")
        return f"{base}/{SEND_ACTION}?{self._query(request)}"

    @staticmethod
    def _query(request: PaymentRequest) -> str:
        values = {
            "to": request.to,
            "amount": request.amount,
            "token": request.token,
            "label": request.label,
            "memo": request.memo,
            "chainId": str(request.chain_id) if request.chain_id is not None else None,
        }
        # Absent optional fields are omitted, never written empty
        return urlencode([(name, values[name]) for name in PAYMENT_LINK_PARAMS if values[name]])

    # ------------------------------------------------------------------
    # Decoding
    # ------------------------------------------------------------------

    def decode(self, uri: str) -> PaymentRequest | None:
        """
        Decode a deep link or web link into a payment request.

        Args:
            uri: Deep link or web URL

        Returns:
            PaymentRequest, or None if the link is malformed or incomplete
        """
        request, error = self.decode_verbose(uri)
        if error is not None:
            logger.warning(f"Failed to decode payment link ({error.code}): {error.message}")
        return request

    def decode_verbose(self, uri: str) -> tuple[PaymentRequest | None, DecodeError | None]:
        """
        Decode a link and report why it failed.

        Returns:
            Tuple of (request, None) on success or (None, DecodeError)
        """
        try:
            return self._decode(uri), None
        except DecodeError as e:
            return None, e
        except (ValueError, TypeError, AttributeError) as e:
            return None, DecodeError(f"Malformed payment link: {e}", "MALFORMED_URI")

    def _decode(self, uri: str) -> PaymentRequest:
        if not isinstance(uri, str) or not uri:
            raise DecodeError("Payment link is empty", "MALFORMED_URI")

        if uri.startswith(self._prefix):
            uri = f"{_PARSEABLE_SCHEME}://{uri[len(self._prefix):]}"

        parts = urlsplit(uri)
        if not parts.scheme or not parts.netloc:
            raise DecodeError(f"Not a URI: {uri!r}", "MALFORMED_URI")

        query = parse_qs(parts.query, keep_blank_values=True)

        def first(name: str) -> str | None:
            values = query.get(name)
            return values[0] if values else None

        to = first("to")
        amount = first("amount")
        if not to or not amount:
            raise DecodeError("Missing required parameters: to or amount", "MISSING_FIELD")

        if not is_valid_address(to):
            raise DecodeError(f"Invalid recipient address: {to}", "INVALID_ADDRESS")

        raw_chain_id = first("chainId")
        if raw_chain_id:
            try:
                chain_id = int(raw_chain_id)
            except ValueError as e:
                raise DecodeError(
                    f"Invalid chainId: {raw_chain_id!r}", "INVALID_CHAIN_ID"
                ) from e
        else:
            chain_id = self.default_chain_id

        try:
            return PaymentRequest(
                to=to,
                amount=amount,
                token=first("token") or None,
                label=first("label") or None,
                memo=first("memo") or None,
                chain_id=chain_id,
            )
        except PydanticValidationError as e:
            raise DecodeError(
                f"Invalid payment parameters: {e.errors()[0]['msg']}", "INVALID_FIELD"
            ) from e

    def parse(self, uri: str) -> DeepLinkSchema | None:
        """
        Parse a native-scheme deep link into protocol, action and params.

        Web fallback links are not accepted here.

        Args:
            uri: Deep link URL

        Returns:
            DeepLinkSchema or None
        """
        if not isinstance(uri, str) or not uri.startswith(self._prefix):
            logger.warning("Not a deep link: missing custom scheme")
            return None

        protocol, rest = uri.split("://", 1)
        action = rest.split("?", 1)[0].strip("/")

        request = self.decode(uri)
        if request is None:
            return None

        return DeepLinkSchema(protocol=protocol, action=action, params=request)


default_codec = PaymentLinkCodec.from_settings()


def encode_payment_link(request: PaymentRequest, scheme: str | None = None) -> str:
    """Encode a payment request into a deep link (configured scheme by default)."""
    if scheme and scheme != default_codec.scheme:
        codec = PaymentLinkCodec(scheme, default_codec.web_base_url, default_codec.default_chain_id)
        return codec.encode(request)
    return default_codec.encode(request)


def encode_web_payment_link(request: PaymentRequest, base_url: str | None = None) -> str:
    """Encode a payment request into a web fallback link."""
    return default_codec.encode_web(request, base_url)


def decode_payment_link(uri: str) -> PaymentRequest | None:
    """Decode a deep link or web link; None when it cannot be decoded."""
    return default_codec.decode(uri)


def decode_payment_link_verbose(uri: str) -> tuple[PaymentRequest | None, DecodeError | None]:
    """Decode a link, also returning the failure reason."""
    return default_codec.decode_verbose(uri)


def parse_deep_link(uri: str) -> DeepLinkSchema | None:
    """Parse a native-scheme deep link; None for web links or bad input."""
    return default_codec.parse(uri)
