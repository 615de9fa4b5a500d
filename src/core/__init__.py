"""Core domain package for wordcloud-bot.

Core contains corpus assembly, pagination, date-range validation, and the
pipeline orchestrator without any Slack or HTTP-specific code, keeping the
business logic portable.
"""
