"""Application layer - announcement script builders."""
