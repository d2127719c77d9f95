# marc_codec/application/__init__.py

"""Codec logic: character encodings and binary record framing"""
