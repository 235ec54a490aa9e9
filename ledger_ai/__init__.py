"""Ledger AI: LLM-powered transaction categorization for Actual Budget."""
