"""
Core domain logic: change ledger, table queries and the Gemini gateway.
"""
