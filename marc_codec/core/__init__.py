# marc_codec/core/__init__.py

"""Domain model and shared types"""
