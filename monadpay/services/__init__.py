"""
Payment services.

- deeplink - payment link codec
- batch - batch payment aggregation
- lifecycle - transaction state tracking
- blockchain - chain collaborator and payment orchestration
"""
