"""Generic OSM tag layer.

The flat tag store plus helpers that every tag encoder builds on: per-side
key families, check dates, oneway predicates and the sidewalk family.
"""
