"""contentguard — rule-based content moderation for user-generated text.

Scores reviews, chat messages and listing descriptions against a tiered
term catalog and turns the score into an APPROVE / FLAG / BLOCK decision.
"""

__version__ = "0.1.0"
