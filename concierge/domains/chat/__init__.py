"""
Travel Concierge - Chat Domain
Conversation history, conversational replies and turn orchestration.
"""
