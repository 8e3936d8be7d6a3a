"""Payment link encoding and decoding."""

from monadpay.services.deeplink.codec import (
    PaymentLinkCodec,
    decode_payment_link,
    decode_payment_link_verbose,
    default_codec,
    encode_payment_link,
    encode_web_payment_link,
    parse_deep_link,
)


__all__ = [
    "PaymentLinkCodec",
    "default_codec",
    "encode_payment_link",
    "encode_web_payment_link",
    "decode_payment_link",
    "decode_payment_link_verbose",
    "parse_deep_link",
]
