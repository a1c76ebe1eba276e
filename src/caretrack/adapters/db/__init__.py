"""Database plumbing: engine factory, shared metadata, table schema, migrations."""
