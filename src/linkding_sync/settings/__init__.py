"""Persisted sync settings: model, key-value store and the editing service."""
