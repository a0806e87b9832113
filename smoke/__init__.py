"""End-to-end smoke runner for a deployed FooBar service."""
