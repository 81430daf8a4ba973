"""Unit tests.

Purpose
- Verify a single module/class/function in isolation.

Guidelines
- No real threads or event loops; use `ManualScheduler` for deferred work.
- Prefer behavior-centric assertions over implementation details.
- Keep tests small, fast, and deterministic.
"""
