"""Service layer — round engine, statistics loop, and the result contract."""
