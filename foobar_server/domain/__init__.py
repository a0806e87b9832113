"""Pure domain logic for the FooBar sequence.

Free of FastAPI/HTTP concerns so it can be unit-tested and reused by both the
server and the smoke runner.
"""
__all__ = ["sequence"]
