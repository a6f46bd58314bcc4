"""
Quest Center core — store, progression engine, eligibility gate, navigation.

Pure Python + Pydantic. No transport, no persistence backend.
"""
