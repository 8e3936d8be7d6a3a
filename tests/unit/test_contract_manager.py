"""Unit tests for contract call construction."""

import pytest
from eth_utils import to_checksum_address

from monadpay.services.blockchain import ERC20_ABI, PROCESSOR_ABI
from monadpay.utils.exceptions import ValidationError


RECIPIENT = "0x742d35cc6634c0532925a3b844bc9e7595f0beb0"
SECOND = "0x92f6d61c4d88f6df0dbc260a594681f82347f840"
USDC = "0xd9C73AF78191Be2C3088FB8755a3374779E3c727"
REQUEST_ID = "0x" + "cd" * 32


class TestPaymentCalls:
    """Tests for payment call payloads."""

    def test_addresses_checksummed(self, contracts):
        """Lowercase input addresses are checksummed."""
        call = contracts.process_payment(RECIPIENT, 10**18)
        assert call.address == contracts.processor_address
        assert call.args[0] == to_checksum_address(RECIPIENT)
        assert call.abi == PROCESSOR_ABI

    def test_absent_label_and_memo_are_empty(self, contracts):
        """Missing label and memo are sent as empty strings."""
        call = contracts.process_payment(RECIPIENT, 1)
        assert call.args[1:] == ("", "")

    def test_zero_amount_rejected(self, contracts):
        """Zero-value payments are rejected."""
        with pytest.raises(ValidationError):
            contracts.process_payment(RECIPIENT, 0)

    def test_batch_value_is_sum(self, contracts):
        """Native batch value is the sum of the amounts."""
        call = contracts.process_batch_payment((RECIPIENT, SECOND), (3, 4), "Batch Payment")
        assert call.value == 7
        assert call.args[0] == [to_checksum_address(RECIPIENT), to_checksum_address(SECOND)]

    def test_token_batch_has_no_value(self, contracts):
        """Token batch attaches no value."""
        call = contracts.process_batch_token_payment((RECIPIENT, SECOND), (3, 4), USDC, "Payroll")
        assert call.value == 0
        assert call.function_name == "processBatchTokenPayment"


class TestRequestCalls:
    """Tests for payment request and view calls."""

    def test_native_request_uses_zero_address(self, contracts):
        """None token becomes the zero address."""
        call = contracts.create_payment_request(5, None, None, None, 60)
        assert call.args[1] == "0x0000000000000000000000000000000000000000"

    def test_non_positive_expiry_rejected(self, contracts):
        """Expiry must be positive."""
        with pytest.raises(ValidationError):
            contracts.create_payment_request(5, None, None, None, 0)

    @pytest.mark.parametrize("method", ["get_payment_request", "get_payment_details", "get_batch_payment"])
    def test_view_calls_validate_ids(self, contracts, method):
        """bytes32 ids must be 0x + 64 hex characters."""
        with pytest.raises(ValidationError):
            getattr(contracts, method)("0x1234")
        assert getattr(contracts, method)(REQUEST_ID).args == (REQUEST_ID,)

    def test_totals(self, contracts):
        """Total counters take no arguments."""
        assert contracts.get_total_payments().function_name == "getTotalPayments"
        assert contracts.get_total_payment_requests().args == ()
        assert contracts.get_total_batch_payments().value == 0


class TestTokenCalls:
    """Tests for ERC-20 calls."""

    def test_approve_spender_is_processor(self, contracts):
        """Processor is approved as spender."""
        call = contracts.approve_token(USDC, 100)
        assert call.abi == ERC20_ABI
        assert call.args == (contracts.processor_address, 100)

    def test_allowance_and_balance(self, contracts):
        """Allowance and balance target the token contract."""
        allowance = contracts.token_allowance(USDC, RECIPIENT)
        balance = contracts.token_balance(USDC, RECIPIENT)
        assert allowance.args == (to_checksum_address(RECIPIENT), contracts.processor_address)
        assert balance.args == (to_checksum_address(RECIPIENT),)
        assert allowance.address == balance.address == to_checksum_address(USDC)
