"""Pydantic response models for folders, notes, errors and health."""
