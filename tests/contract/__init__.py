"""Contract tests.

Purpose
- Define behavior/invariants once and run them against every `TaskScheduler`
  adapter to keep them interchangeable.

Guidelines
- Parametrize implementations via fixtures.
- Assert only the public contract (ordering, exactly-once, deferral).
"""
