"""
security/ - Credential Helpers
==============================
Password hashing used by the credential repository.
"""
