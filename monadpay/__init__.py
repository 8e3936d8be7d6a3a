"""MonadPay: payment links, batch payments and transaction tracking for Monad."""

__version__ = "0.1.0"
