"""Click application for caretrack (``caretrack`` console script)."""
