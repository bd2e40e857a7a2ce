"""Hack assembler toolchain.

Provides CLI over `libhackasm` core.
"""
