# marc_codec/adapters/__init__.py

"""Adapters around the codec: API, CLI, MARC XML and JSON"""
