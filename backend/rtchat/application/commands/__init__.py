"""
COMMANDS - Write operations (CQRS)

Subfolders:
- auth/          → authenticate
- conversations/ → start_conversation, append_message
"""
