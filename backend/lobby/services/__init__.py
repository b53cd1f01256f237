"""Lobby domain services: host registry, race list and leaderboard.

Each service loads its whole collection from the store, applies a pure
transformation and writes the whole collection back. HTTP routes call into
these modules so the transport stays separate from the collection rules.
"""
