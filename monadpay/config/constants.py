"""
Protocol constants.

Centralized constants for payment links, batches and on-chain units.
"""

# ========================================================================
# NETWORK
# ========================================================================

# Monad testnet chain id, used whenever a link omits chainId
DEFAULT_CHAIN_ID = 10143

# Native currency (MON) uses 18 decimals
NATIVE_DECIMALS = 18

# Zero address - marks the native currency in token fields
ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"

# ========================================================================
# PAYMENT LINKS
# ========================================================================

DEEP_LINK_SCHEME = "monadpay"
SEND_ACTION = "send"
DEFAULT_WEB_BASE_URL = "http://localhost:3000"

# Stable query parameter order for encoded links
PAYMENT_LINK_PARAMS = ("to", "amount", "token", "label", "memo", "chainId")

# ========================================================================
# BATCH PAYMENTS
# ========================================================================

MIN_BATCH_RECIPIENTS = 2
DEFAULT_BATCH_LABEL = "Batch Payment"

# ========================================================================
# BLOCKCHAIN
# ========================================================================

BLOCKCHAIN_RPC_TIMEOUT = 30  # RPC provider HTTP timeout (seconds)
RECEIPT_TIMEOUT = 120.0  # Receipt wait inside the web3 collaborator (seconds)
RECEIPT_POLL_LATENCY = 0.5  # Receipt poll interval inside the web3 collaborator

# Payment request expiry bounds (seconds)
DEFAULT_REQUEST_EXPIRY = 24 * 60 * 60
MAX_REQUEST_EXPIRY = 30 * 24 * 60 * 60
