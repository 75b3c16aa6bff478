"""CRUD scaffolding generator."""
