"""Members API — CRUD service for club members."""
