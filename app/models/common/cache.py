"""Survey cache table - one JSON document per key."""

CACHE_DDL = """
CREATE TABLE IF NOT EXISTS survey_cache (
    key VARCHAR PRIMARY KEY,
    data VARCHAR NOT NULL,
    updated_at TIMESTAMP NOT NULL
)
"""
