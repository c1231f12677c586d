"""Core building blocks: singleton patterns and the concurrency harness."""
