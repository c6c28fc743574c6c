"""Structural request/response records built on the core codecs.

These depend on :mod:`pushwire.domain` for their hybrid field types and on
pydantic for everything else.
"""
