"""Service layer for response mapping."""

from .response_mapper import map_post, map_comments

__all__ = ['map_post', 'map_comments']
