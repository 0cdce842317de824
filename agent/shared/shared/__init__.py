"""Shared configuration and schemas for the storage tool server."""
