"""
Data providers for the grana.io and stock fundamentals APIs.

Each provider builds one GET request per call and returns the response's
data field untouched.
"""
