"""Encoder of resolved instructions into Hack machine code (binary text form)."""

from .encoder import encode_instruction, encode_instructions

__all__ = ["encode_instruction", "encode_instructions"]
