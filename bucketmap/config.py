"""
Tuning constants for the bucketmap containers.

These are plain module-level settings; the containers read them at call
time, so tests may monkeypatch them.
"""

# Number of buckets allocated by the first insert into an empty table.
INITIAL_NUM_BUCKETS = 1

# Maximum load factor as an integer ratio: a table of n buckets holds at
# most floor(n * 3 / 4) entries.
MAX_LOAD_NUMERATOR = 3
MAX_LOAD_DENOMINATOR = 4

# Bucket array multiplier applied on every resize.
GROWTH_FACTOR = 2
