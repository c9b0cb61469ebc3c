"""Entrypoints layer - Delivery mechanisms.

This layer contains:
- CLI: ``upi-dispatch`` command (argparse)

Entrypoints wire system adapters into the use cases, translate arguments
into requests and format responses for the terminal.
"""
