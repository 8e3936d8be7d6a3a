"""Unit tests for payment link encoding and decoding."""

import pytest

from monadpay.config.constants import DEFAULT_CHAIN_ID
from monadpay.models import PaymentRequest
from monadpay.services.deeplink import (
    PaymentLinkCodec,
    decode_payment_link,
    decode_payment_link_verbose,
    encode_payment_link,
    encode_web_payment_link,
    parse_deep_link,
)


RECIPIENT = "0x742d35Cc6634C0532925a3b844Bc9e7595f0bEb0"
USDC = "0xd9C73AF78191Be2C3088FB8755a3374779E3c727"


@pytest.fixture
def full_request():
    """Payment request with every optional field set."""
    return PaymentRequest(
        to=RECIPIENT,
        amount="1.5",
        token=USDC,
        label="Coffee payment",
        memo="Thanks for the coffee!",
        chain_id=10143,
    )


class TestEncoding:
    """Tests for deep link and web link encoding."""

    def test_minimal_deep_link(self):
        """Only required parameters are written."""
        request = PaymentRequest(to=RECIPIENT, amount="1.5")
        assert encode_payment_link(request) == f"monadpay://send?to={RECIPIENT}&amount=1.5"

    def test_parameter_order(self, full_request):
        """Parameters follow to, amount, token, label, memo, chainId."""
        link = encode_payment_link(full_request)
        query = link.split("?", 1)[1]
        names = [pair.split("=", 1)[0] for pair in query.split("&")]
        assert names == ["to", "amount", "token", "label", "memo", "chainId"]

    def test_optional_fields_omitted_when_absent(self):
        """Absent optional fields never appear as empty parameters."""
        link = encode_payment_link(PaymentRequest(to=RECIPIENT, amount="2", memo="rent"))
        assert "token=" not in link
        assert "label=" not in link
        assert "chainId=" not in link
        assert "memo=rent" in link

    def test_reserved_characters_escaped(self):
        """Characters meaningful in a query string are percent-encoded."""
        request = PaymentRequest(to=RECIPIENT, amount="1", label="a&b=c")
        link = encode_payment_link(request)
        assert "label=a%26b%3Dc" in link

    def test_web_link_uses_base_url(self, full_request):
        """Web fallback link is <base>/send?..."""
        link = encode_web_payment_link(full_request, "https://pay.monad.link")
        assert link.startswith("https://pay.monad.link/send?to=")

    def test_web_link_no_double_slash(self, full_request):
        """Trailing slash on the base URL is not doubled."""
        link = encode_web_payment_link(full_request, "https://pay.monad.link/")
        assert link.startswith("https://pay.monad.link/send?")

    def test_web_link_default_base(self):
        """Configured base URL is used when none is passed."""
        link = encode_web_payment_link(PaymentRequest(to=RECIPIENT, amount="1"))
        assert link.startswith("http://localhost:3000/send?")

    def test_custom_scheme(self):
        """Codec instance honours its own scheme."""
        codec = PaymentLinkCodec(scheme="otherpay", web_base_url="https://example.com")
        link = codec.encode(PaymentRequest(to=RECIPIENT, amount="1"))
        assert link.startswith("otherpay://send?")
        assert codec.decode(link) is not None


class TestRoundTrip:
    """Tests that decode(encode(r)) reproduces r."""

    def test_full_request_round_trip(self, full_request):
        """All fields survive a deep link round trip."""
        assert decode_payment_link(encode_payment_link(full_request)) == full_request

    def test_web_link_round_trip(self, full_request):
        """All fields survive a web link round trip."""
        link = encode_web_payment_link(full_request, "https://pay.monad.link")
        assert decode_payment_link(link) == full_request

    def test_unicode_round_trip(self):
        """Non-ASCII labels and memos survive."""
        request = PaymentRequest(
            to=RECIPIENT, amount="0.25", label="Café ☕", memo="merci & à bientôt", chain_id=1
        )
        assert decode_payment_link(encode_payment_link(request)) == request

    def test_absent_chain_id_defaults(self):
        """Missing chainId decodes to the default chain id; other fields stay absent."""
        request = PaymentRequest(to=RECIPIENT, amount="3")
        decoded = decode_payment_link(encode_payment_link(request))
        assert decoded.chain_id == DEFAULT_CHAIN_ID
        assert decoded.token is None
        assert decoded.label is None
        assert decoded.memo is None


class TestDecodingFailures:
    """Tests that malformed links yield None instead of raising."""

    def test_not_a_uri(self):
        """Plain text is not a payment link."""
        assert decode_payment_link("not-a-uri") is None

    def test_empty_string(self):
        """Empty input is not a payment link."""
        assert decode_payment_link("") is None

    def test_missing_to(self):
        """Link without recipient is rejected."""
        assert decode_payment_link("monadpay://send?amount=1") is None

    def test_missing_amount(self):
        """Link without amount is rejected."""
        assert decode_payment_link(f"monadpay://send?to={RECIPIENT}") is None

    def test_empty_to(self):
        """Empty recipient counts as missing."""
        assert decode_payment_link("monadpay://send?to=&amount=1") is None

    def test_short_address(self):
        """Malformed recipient address is rejected."""
        assert decode_payment_link("monadpay://send?to=0xShort&amount=1") is None

    def test_non_integer_chain_id(self):
        """Non-integer chainId is a decode failure."""
        link = f"monadpay://send?to={RECIPIENT}&amount=1&chainId=abc"
        assert decode_payment_link(link) is None

    def test_non_positive_amount(self):
        """Zero amount violates the payment request invariants."""
        assert decode_payment_link(f"monadpay://send?to={RECIPIENT}&amount=0") is None

    def test_invalid_token(self):
        """Malformed token address is rejected."""
        link = f"monadpay://send?to={RECIPIENT}&amount=1&token=0x12"
        assert decode_payment_link(link) is None

    def test_bad_ipv6_host(self):
        """Unparseable authority is absorbed, not raised."""
        assert decode_payment_link("http://[::1/send?to=x&amount=1") is None


class TestVerboseDecoding:
    """Tests for decode failure reasons."""

    def test_success_has_no_error(self, full_request):
        """Successful decode returns the request and no error."""
        request, error = decode_payment_link_verbose(encode_payment_link(full_request))
        assert request == full_request
        assert error is None

    @pytest.mark.parametrize(
        "uri, code",
        [
            ("not-a-uri", "MALFORMED_URI"),
            ("monadpay://send?amount=1", "MISSING_FIELD"),
            ("monadpay://send?to=0xShort&amount=1", "INVALID_ADDRESS"),
            (f"monadpay://send?to={RECIPIENT}&amount=1&chainId=ten", "INVALID_CHAIN_ID"),
            (f"monadpay://send?to={RECIPIENT}&amount=-1", "INVALID_FIELD"),
            (f"monadpay://send?to={RECIPIENT}&amount=1_000", "INVALID_FIELD"),
        ],
    )
    def test_failure_codes(self, uri, code):
        """Each failure carries a reason code."""
        request, error = decode_payment_link_verbose(uri)
        assert request is None
        assert error.code == code


class TestDecodingDetails:
    """Tests for lenient decoding behaviour."""

    def test_empty_optional_fields_are_absent(self):
        """Empty optional parameters decode as absent."""
        link = f"monadpay://send?to={RECIPIENT}&amount=1&label=&memo="
        decoded = decode_payment_link(link)
        assert decoded.label is None
        assert decoded.memo is None

    def test_first_duplicate_wins(self):
        """Repeated parameters take their first value."""
        link = f"monadpay://send?to={RECIPIENT}&amount=1&amount=2"
        assert decode_payment_link(link).amount == "1"

    def test_plus_decodes_to_space(self):
        """Form-encoded spaces are decoded."""
        link = f"monadpay://send?to={RECIPIENT}&amount=1&label=Coffee+payment"
        assert decode_payment_link(link).label == "Coffee payment"

    def test_explicit_chain_id_kept(self):
        """Explicit chainId is not replaced by the default."""
        link = f"monadpay://send?to={RECIPIENT}&amount=1&chainId=1"
        assert decode_payment_link(link).chain_id == 1


class TestParseDeepLink:
    """Tests for deep link parsing into protocol/action/params."""

    def test_parse_deep_link(self, full_request):
        """Protocol and action are split out of a native link."""
        schema = parse_deep_link(encode_payment_link(full_request))
        assert schema.protocol == "monadpay"
        assert schema.action == "send"
        assert schema.params == full_request

    def test_web_link_rejected(self, full_request):
        """Web fallback links are not deep links."""
        link = encode_web_payment_link(full_request, "https://pay.monad.link")
        assert parse_deep_link(link) is None

    def test_invalid_params_rejected(self):
        """Deep link with bad parameters parses to None."""
        assert parse_deep_link("monadpay://send?to=0xShort&amount=1") is None

    def test_garbage_rejected(self):
        """Arbitrary text parses to None."""
        assert parse_deep_link("not-a-uri") is None
