"""
Core blockchain constants.

This module contains the contract ABIs used by the payment collaborator:
- MonadPay payment processor ABI (payments, requests, batches, queries)
- ERC-20 ABI (approve, balanceOf, allowance)
"""

# Payment processor ABI
PROCESSOR_ABI = [
    # Standard payments
    {
        "inputs": [
            {"internalType": "address payable", "name": "to", "type": "address"},
            {"internalType": "string", "name": "label", "type": "string"},
            {"internalType": "string", "name": "memo", "type": "string"},
        ],
        "name": "processPayment",
        "outputs": [{"internalType": "bytes32", "name": "", "type": "bytes32"}],
        "stateMutability": "payable",
        "type": "function",
    },
    {
        "inputs": [
            {"internalType": "address", "name": "to", "type": "address"},
            {"internalType": "address", "name": "token", "type": "address"},
            {"internalType": "uint256", "name": "amount", "type": "uint256"},
            {"internalType": "string", "name": "label", "type": "string"},
            {"internalType": "string", "name": "memo", "type": "string"},
        ],
        "name": "processTokenPayment",
        "outputs": [{"internalType": "bytes32", "name": "", "type": "bytes32"}],
        "stateMutability": "nonpayable",
        "type": "function",
    },
    # Payment requests (payee-initiated, with expiry)
    {
        "inputs": [
            {"internalType": "uint256", "name": "amount", "type": "uint256"},
            {"internalType": "address", "name": "token", "type": "address"},
            {"internalType": "string", "name": "label", "type": "string"},
            {"internalType": "string", "name": "memo", "type": "string"},
            {"internalType": "uint256", "name": "expiryDuration", "type": "uint256"},
        ],
        "name": "createPaymentRequest",
        "outputs": [{"internalType": "bytes32", "name": "requestId", "type": "bytes32"}],
        "stateMutability": "nonpayable",
        "type": "function",
    },
    {
        "inputs": [{"internalType": "bytes32", "name": "requestId", "type": "bytes32"}],
        "name": "payPaymentRequest",
        "outputs": [],
        "stateMutability": "payable",
        "type": "function",
    },
    {
        "inputs": [{"internalType": "bytes32", "name": "requestId", "type": "bytes32"}],
        "name": "getPaymentRequest",
        "outputs": [
            {
                "components": [
                    {"internalType": "address", "name": "payee", "type": "address"},
                    {"internalType": "uint256", "name": "amount", "type": "uint256"},
                    {"internalType": "address", "name": "token", "type": "address"},
                    {"internalType": "string", "name": "label", "type": "string"},
                    {"internalType": "string", "name": "memo", "type": "string"},
                    {"internalType": "uint256", "name": "createdAt", "type": "uint256"},
                    {"internalType": "uint256", "name": "expiresAt", "type": "uint256"},
                    {"internalType": "bool", "name": "completed", "type": "bool"},
                    {"internalType": "bool", "name": "expired", "type": "bool"},
                ],
                "internalType": "struct MonadPayProcessor.PaymentRequest",
                "name": "",
                "type": "tuple",
            }
        ],
        "stateMutability": "view",
        "type": "function",
    },
    # Batch payments
    {
        "inputs": [
            {"internalType": "address[]", "name": "recipients", "type": "address[]"},
            {"internalType": "uint256[]", "name": "amounts", "type": "uint256[]"},
            {"internalType": "string", "name": "label", "type": "string"},
        ],
        "name": "processBatchPayment",
        "outputs": [{"internalType": "bytes32", "name": "batchId", "type": "bytes32"}],
        "stateMutability": "payable",
        "type": "function",
    },
    {
        "inputs": [
            {"internalType": "address[]", "name": "recipients", "type": "address[]"},
            {"internalType": "uint256[]", "name": "amounts", "type": "uint256[]"},
            {"internalType": "address", "name": "token", "type": "address"},
            {"internalType": "string", "name": "label", "type": "string"},
        ],
        "name": "processBatchTokenPayment",
        "outputs": [{"internalType": "bytes32", "name": "batchId", "type": "bytes32"}],
        "stateMutability": "nonpayable",
        "type": "function",
    },
    {
        "inputs": [{"internalType": "bytes32", "name": "batchId", "type": "bytes32"}],
        "name": "getBatchPayment",
        "outputs": [
            {
                "components": [
                    {"internalType": "address", "name": "from", "type": "address"},
                    {"internalType": "address[]", "name": "recipients", "type": "address[]"},
                    {"internalType": "uint256[]", "name": "amounts", "type": "uint256[]"},
                    {"internalType": "address", "name": "token", "type": "address"},
                    {"internalType": "string", "name": "label", "type": "string"},
                    {"internalType": "uint256", "name": "timestamp", "type": "uint256"},
                    {"internalType": "bool", "name": "processed", "type": "bool"},
                ],
                "internalType": "struct MonadPayProcessor.BatchPayment",
                "name": "",
                "type": "tuple",
            }
        ],
        "stateMutability": "view",
        "type": "function",
    },
    # Queries
    {
        "inputs": [{"internalType": "bytes32", "name": "paymentId", "type": "bytes32"}],
        "name": "getPaymentDetails",
        "outputs": [
            {
                "components": [
                    {"internalType": "address", "name": "from", "type": "address"},
                    {"internalType": "address", "name": "to", "type": "address"},
                    {"internalType": "uint256", "name": "amount", "type": "uint256"},
                    {"internalType": "address", "name": "token", "type": "address"},
                    {"internalType": "string", "name": "label", "type": "string"},
                    {"internalType": "string", "name": "memo", "type": "string"},
                    {"internalType": "uint256", "name": "timestamp", "type": "uint256"},
                    {"internalType": "bool", "name": "processed", "type": "bool"},
                ],
                "internalType": "struct MonadPayProcessor.Payment",
                "name": "",
                "type": "tuple",
            }
        ],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [],
        "name": "getTotalPayments",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [],
        "name": "getTotalPaymentRequests",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [],
        "name": "getTotalBatchPayments",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function",
    },
]

# ERC-20 ABI (subset used for approvals and balance checks)
ERC20_ABI = [
    {
        "inputs": [
            {"internalType": "address", "name": "spender", "type": "address"},
            {"internalType": "uint256", "name": "amount", "type": "uint256"},
        ],
        "name": "approve",
        "outputs": [{"internalType": "bool", "name": "", "type": "bool"}],
        "stateMutability": "nonpayable",
        "type": "function",
    },
    {
        "inputs": [{"internalType": "address", "name": "account", "type": "address"}],
        "name": "balanceOf",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [
            {"internalType": "address", "name": "owner", "type": "address"},
            {"internalType": "address", "name": "spender", "type": "address"},
        ],
        "name": "allowance",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function",
    },
]
