"""Adapters that connect the core pipeline to Slack and QuickChart."""
