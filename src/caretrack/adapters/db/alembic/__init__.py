"""Packaged Alembic migration environment for CARETRACK."""
