"""
AI collaborators. The core only depends on their protocols.
"""
